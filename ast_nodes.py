"""AST node definitions for the Spanish-keyword expression language.

This module defines the syntactic node dataclasses produced by the parser
and walked by the evaluator and the debugging printers. Each node is a
dataclass carrying the information of one construct (names, operator token,
child nodes). The `NodeType` enum identifies node kinds.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the `line`/`column` of the token the construct
    starts at.
- There is no statement/expression split: every node is a *form* that may
    appear at the top level or inside a block, so the evaluator can simply
    pattern-match on the node class.
- The consequence and alternative of `IfNode`, and the bodies of `WhileNode`
    and `FunctionNode`, are always `BlockNode`s.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, List
from tokens import Token, TokenType


class NodeType(Enum):
    PROGRAM = auto()
    BLOCK = auto()
    ASSIGNMENT = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    BOOLEAN = auto()
    INFIX = auto()
    MINUS = auto()
    NOT = auto()
    IF = auto()
    WHILE = auto()
    FUNCTION = auto()
    FUNCTION_CALL = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    line: int = 0
    column: int = 0


# Expression Nodes
@dataclass
class IntegerNode(ASTNode):
    type: NodeType = NodeType.INTEGER
    value: int = 0


@dataclass
class BooleanNode(ASTNode):
    type: NodeType = NodeType.BOOLEAN
    value: bool = False


@dataclass
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    name: str = ""


@dataclass
class InfixNode(ASTNode):
    type: NodeType = NodeType.INFIX
    left: ASTNode = field(default_factory=lambda: IntegerNode())
    operator: Token = field(default_factory=lambda: Token(TokenType.PLUS, "+"))
    right: ASTNode = field(default_factory=lambda: IntegerNode())


@dataclass
class MinusNode(ASTNode):
    type: NodeType = NodeType.MINUS
    operand: ASTNode = field(default_factory=lambda: IntegerNode())


@dataclass
class NotNode(ASTNode):
    type: NodeType = NodeType.NOT
    operand: ASTNode = field(default_factory=lambda: BooleanNode())


@dataclass
class FunctionCallNode(ASTNode):
    type: NodeType = NodeType.FUNCTION_CALL
    name: str = ""
    arguments: List[ASTNode] = field(default_factory=list)


# Statement-like Nodes
@dataclass
class BlockNode(ASTNode):
    type: NodeType = NodeType.BLOCK
    forms: List[ASTNode] = field(default_factory=list)


@dataclass
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGNMENT
    name: str = ""
    value: ASTNode = field(default_factory=lambda: IntegerNode())


@dataclass
class IfNode(ASTNode):
    type: NodeType = NodeType.IF
    condition: ASTNode = field(default_factory=lambda: BooleanNode())
    consequence: BlockNode = field(default_factory=lambda: BlockNode())
    alternative: Optional[BlockNode] = None


@dataclass
class WhileNode(ASTNode):
    type: NodeType = NodeType.WHILE
    condition: ASTNode = field(default_factory=lambda: BooleanNode())
    body: BlockNode = field(default_factory=lambda: BlockNode())


@dataclass
class FunctionNode(ASTNode):
    type: NodeType = NodeType.FUNCTION
    parameters: List[IdentifierNode] = field(default_factory=list)
    body: BlockNode = field(default_factory=lambda: BlockNode())


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    forms: List[ASTNode] = field(default_factory=list)
