"""
Lexer for the Spanish-keyword expression language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms a source string into a stream of `Token` objects defined in
    `tokens.py`, one token per call to `next_token()`.
- It recognizes integer literals, identifiers and the reserved words of the
    `KEYWORDS` table (`si`, `sino`, `mientras`, `función`, ...), the
    assignment operator `:=`, and single-character operators and delimiters.
    Spaces, tabs and newlines separate tokens.

Examples:
    Input:  "a := función(x) x + 1."
    Tokens: [IDENT('a'), ASSIGN, FUNCTION, LPAREN, IDENT('x'), RPAREN, ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`; `line` is 1-based and `column` 0-based, and both
    always describe `self.current_char`.
- Identifiers may contain ASCII letters, digits (not first), underscore and
    the accented Latin letters in `LATIN_LETTERS`.
- The lexer never raises. Unknown characters become `ILLEGAL` tokens, and once
    the input is exhausted every call returns an `EOF` token.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import KEYWORDS, Token, TokenType

WHITESPACE = " \n\t"
LATIN_LETTERS = "áéíóúàèìòùâêîôûäëïöüñçÁÉÍÓÚÀÈÌÒÙÂÊÎÔÛÄËÏÖÜÑÇ"

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    ".": TokenType.POINT,
    "*": TokenType.MULTIPLICATION,
    "/": TokenType.DIVISION,
    "=": TokenType.EQUALS,
    ";": TokenType.SEMICOLON,
}


def is_digit(char: Optional[str]) -> bool:
    return char is not None and "0" <= char <= "9"


def is_letter(char: Optional[str]) -> bool:
    if char is None:
        return False
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_" or char in LATIN_LETTERS


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 0
        self.current_char = self.source[self.pos] if self.source else None

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 0
        elif self.current_char is not None:
            self.column += 1

        if self.current_char is not None:
            self.pos += 1
        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.source):
            return self.source[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def read_number(self) -> str:
        """Read the maximal run of decimal digits."""
        result = []
        while is_digit(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def read_identifier(self) -> str:
        """Read an identifier or keyword: a letter followed by letters and digits."""
        result = [self.current_char]
        self.advance()
        while is_letter(self.current_char) or is_digit(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()
        line, column = self.line, self.column
        char = self.current_char

        if char is None:
            return Token(TokenType.EOF, "", line, column)

        if is_digit(char):
            return Token(TokenType.INT, self.read_number(), line, column)

        if is_letter(char):
            ident = self.read_identifier()
            token_type = KEYWORDS.get(ident, TokenType.IDENT)
            return Token(token_type, ident, line, column)

        # `:=` is the only two-character token; a lone `:` is illegal.
        if char == ":" and self.peek_char() == "=":
            self.advance()
            self.advance()
            return Token(TokenType.ASSIGN, ":=", line, column)

        self.advance()
        token_type = SINGLE_CHAR_TOKENS.get(char, TokenType.ILLEGAL)
        return Token(token_type, char, line, column)

    def tokenize(self) -> List[Token]:
        """Return all tokens up to and including the first EOF."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
