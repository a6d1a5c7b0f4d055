"""
Parser for the Spanish-keyword expression language.

Overview and approach:
- This parser implements a small, hand-written Pratt-style parser. It pulls
    tokens from a `Lexer` on demand and keeps a three-token window
    (`current`, `peek`, `peek_peek`); the longest lookahead it ever needs is
    the `si no entonces` idiom.

Key points:
- Form parsing:
    - `parse_form()` dispatches on the window: `ident :=` starts an
        assignment, `si` a conditional, `mientras` a loop, and anything else
        is an expression at the lowest precedence.
    - `parse_block()` accepts either `{ form* }` or a single bare form.

- Expression parsing:
    - `parse_prefix()` recognizes literals, identifiers, parenthesized
        expressions, unary `-` and `no`, and function literals.
    - `parse_expression()` implements the Pratt loop: while the current token
        is an infix operator binding tighter than the caller's precedence,
        extend the tree. The right operand is parsed at the operator's own
        precedence, which makes every operator left-associative. A `(` after
        an identifier turns it into a call.
    - Every expression swallows one trailing `.`; a `.` in prefix position is
        skipped. This is what lets `.` terminate forms and separate the
        parameters of a function literal or the arguments of a call:
        `función(a. b) a + b.` and `f(1. 2)`.

Errors:
- Internally a failure raises `ParseError`. `parse_program()` catches it at
    the form boundary, records a diagnostic, and returns the forms parsed so
    far, so callers never see an exception. Running out of Python stack on a
    deeply nested form is reported the same way.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Dict, List, Optional
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import *
from diagnostics import Diagnostics
from objects import int64_from_decimal


class Precedence(IntEnum):
    LOWEST = 0
    EQUALITY = 1
    SUM = 2
    PRODUCT = 3
    CALL = 4


# Operator precedence table (higher = tighter binding)
PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQUALS: Precedence.EQUALITY,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.MULTIPLICATION: Precedence.PRODUCT,
    TokenType.DIVISION: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


class ParseError(SyntaxError):
    def __init__(self, message: str, token: Token):
        super().__init__(
            f"{message} (line {token.line}, column {token.column})"
        )
        self.message = message
        self.token = token

    @property
    def kind(self) -> str:
        return "lexical" if self.token.type == TokenType.ILLEGAL else "syntactic"


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.diagnostics = Diagnostics()

        eof = Token(TokenType.EOF)
        self.current: Token = eof
        self.peek: Token = eof
        self.peek_peek: Token = eof
        # Fill the three-token window.
        self.advance()
        self.advance()
        self.advance()

    def advance(self) -> Token:
        """Shift the token window by one."""
        self.current = self.peek
        self.peek = self.peek_peek
        self.peek_peek = self.lexer.next_token()
        return self.current

    def error(self, message: str, token: Optional[Token] = None) -> ParseError:
        token = token or self.current
        if token.type == TokenType.ILLEGAL:
            message = f"Illegal character {token.literal!r}"
        return ParseError(message, token)

    def expect(self, expected_type: TokenType, message: Optional[str] = None) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            token = self.current
            self.advance()
            return token

        msg = message or f"Expected {expected_type}, got {self.current.type}"
        raise self.error(msg)

    def match(self, token_type: TokenType) -> bool:
        """Check if current token matches type, consume if true."""
        if self.current.type == token_type:
            self.advance()
            return True
        return False

    def skip_points(self) -> None:
        while self.current.type == TokenType.POINT:
            self.advance()

    def current_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.current.type, Precedence.LOWEST)

    # Forms

    def parse_program(self) -> ProgramNode:
        """Parse forms until EOF or the first error."""
        program = ProgramNode(line=self.current.line, column=self.current.column)

        while True:
            self.skip_points()
            if self.current.type == TokenType.EOF:
                break
            start = self.current
            try:
                program.forms.append(self.parse_form())
            except ParseError as e:
                self.diagnostics.report(
                    e.kind, e.message, e.token.line, e.token.column
                )
                break
            except RecursionError:
                self.diagnostics.report(
                    "syntactic", "Expression nested too deeply", start.line, start.column
                )
                break

        return program

    def parse_form(self) -> ASTNode:
        self.skip_points()
        if self.current.type == TokenType.IDENT and self.peek.type == TokenType.ASSIGN:
            return self.parse_assignment()
        if self.current.type == TokenType.IF:
            return self.parse_if()
        if self.current.type == TokenType.WHILE:
            return self.parse_while()
        return self.parse_expression(Precedence.LOWEST)

    def parse_assignment(self) -> AssignmentNode:
        """Parse assignment: ident := expression"""
        name_token = self.current
        self.advance()  # name
        self.advance()  # ':='
        value = self.parse_expression(Precedence.LOWEST)
        return AssignmentNode(
            name=name_token.literal,
            value=value,
            line=name_token.line,
            column=name_token.column,
        )

    def parse_block(self) -> BlockNode:
        """Parse a block: { form* } or a single bare form."""
        start = self.current
        if not self.match(TokenType.LBRACE):
            return BlockNode(
                forms=[self.parse_form()], line=start.line, column=start.column
            )

        forms: List[ASTNode] = []
        while True:
            self.skip_points()
            if self.current.type in (TokenType.RBRACE, TokenType.EOF):
                break
            forms.append(self.parse_form())

        self.expect(TokenType.RBRACE, "Expected '}' to close block")
        return BlockNode(forms=forms, line=start.line, column=start.column)

    def parse_if(self) -> IfNode:
        """Parse conditional: si cond block [sino block | si no entonces block]"""
        token = self.current
        self.advance()  # 'si'
        condition = self.parse_expression(Precedence.LOWEST)
        consequence = self.parse_block()

        alternative = None
        if self.match(TokenType.ELSE):
            alternative = self.parse_block()
        elif (
            self.current.type == TokenType.IF
            and self.peek.type == TokenType.NOT
            and self.peek_peek.type == TokenType.THEN
        ):
            # `si no entonces` reads as "otherwise"
            self.advance()
            self.advance()
            self.advance()
            alternative = self.parse_block()

        return IfNode(
            condition=condition,
            consequence=consequence,
            alternative=alternative,
            line=token.line,
            column=token.column,
        )

    def parse_while(self) -> WhileNode:
        """Parse loop: mientras cond block"""
        token = self.current
        self.advance()  # 'mientras'
        condition = self.parse_expression(Precedence.LOWEST)
        body = self.parse_block()
        return WhileNode(
            condition=condition, body=body, line=token.line, column=token.column
        )

    # Expressions

    def parse_expression(self, precedence: Precedence) -> ASTNode:
        """Parse an expression binding tighter than `precedence`."""
        left = self.parse_prefix()

        while (
            self.current.type in PRECEDENCES
            and precedence < self.current_precedence()
        ):
            if self.current.type == TokenType.LPAREN:
                left = self.parse_call(left)
            else:
                left = self.parse_infix(left)

        self.match(TokenType.POINT)
        return left

    def parse_prefix(self) -> ASTNode:
        self.skip_points()
        token = self.current

        match token.type:
            case TokenType.INT:
                self.advance()
                return IntegerNode(
                    value=int64_from_decimal(token.literal),
                    line=token.line,
                    column=token.column,
                )

            case TokenType.IDENT:
                self.advance()
                return IdentifierNode(
                    name=token.literal, line=token.line, column=token.column
                )

            case TokenType.TRUE | TokenType.FALSE:
                self.advance()
                return BooleanNode(
                    value=token.type == TokenType.TRUE,
                    line=token.line,
                    column=token.column,
                )

            case TokenType.LPAREN:
                self.advance()  # '('
                expr = self.parse_expression(Precedence.LOWEST)
                self.expect(TokenType.RPAREN, "Expected ')' to close parenthesis")
                return expr

            case TokenType.MINUS:
                self.advance()
                if self.current.type == TokenType.MINUS:
                    raise self.error("Unary '-' cannot be repeated")
                operand = self.parse_expression(Precedence.LOWEST)
                return MinusNode(operand=operand, line=token.line, column=token.column)

            case TokenType.NOT:
                self.advance()
                if self.current.type == TokenType.NOT:
                    raise self.error("'no' cannot be repeated")
                operand = self.parse_expression(Precedence.CALL)
                return NotNode(operand=operand, line=token.line, column=token.column)

            case TokenType.FUNCTION:
                return self.parse_function()

            case TokenType.EOF:
                raise self.error("Unexpected end of input")

            case _:
                raise self.error(f"Unexpected token {token.lexeme!r}")

    def parse_infix(self, left: ASTNode) -> InfixNode:
        operator = self.current
        precedence = self.current_precedence()
        self.advance()
        right = self.parse_expression(precedence)
        return InfixNode(
            left=left,
            operator=operator,
            right=right,
            line=operator.line,
            column=operator.column,
        )

    def parse_call(self, callee: ASTNode) -> FunctionCallNode:
        """Parse call: ident '(' expr* ')'"""
        if not isinstance(callee, IdentifierNode):
            raise self.error("Only names can be called")

        self.advance()  # '('
        arguments: List[ASTNode] = []
        while self.current.type not in (TokenType.RPAREN, TokenType.EOF):
            arguments.append(self.parse_expression(Precedence.LOWEST))

        self.expect(TokenType.RPAREN, "Expected ')' after call arguments")
        return FunctionCallNode(
            name=callee.name,
            arguments=arguments,
            line=callee.line,
            column=callee.column,
        )

    def parse_function(self) -> FunctionNode:
        """Parse function literal: función '(' ident* ')' block"""
        token = self.current
        self.advance()  # 'función'
        self.expect(TokenType.LPAREN, "Expected '(' after 'función'")

        parameters: List[IdentifierNode] = []
        while self.current.type not in (TokenType.RPAREN, TokenType.EOF):
            start = self.current
            param = self.parse_expression(Precedence.LOWEST)
            if not isinstance(param, IdentifierNode):
                raise self.error("Function parameters must be names", start)
            parameters.append(param)

        self.expect(TokenType.RPAREN, "Expected ')' after parameters")
        body = self.parse_block()
        return FunctionNode(
            parameters=parameters, body=body, line=token.line, column=token.column
        )
