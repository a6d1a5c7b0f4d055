"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer, the `KEYWORDS` table mapping reserved Spanish words to their kinds
and a small `Token` dataclass holding the kind, the literal text and the
position the token started at. Tokens are the atomic units produced by the
lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    # Special
    EOF = auto()
    ILLEGAL = auto()

    # Literals
    INT = auto()
    IDENT = auto()

    # Operators
    ASSIGN = auto()
    EQUALS = auto()
    PLUS = auto()
    MINUS = auto()
    MULTIPLICATION = auto()
    DIVISION = auto()

    # Delimiters
    COMMA = auto()
    POINT = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    AND = auto()
    DO = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUNCTION = auto()
    IF = auto()
    NOT = auto()
    OR = auto()
    THEN = auto()
    TRUE = auto()
    WHILE = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Dict[str, TokenType] = {
    "verdadero": TokenType.TRUE,
    "falso": TokenType.FALSE,
    "si": TokenType.IF,
    "sino": TokenType.ELSE,
    "entonces": TokenType.THEN,
    "para": TokenType.FOR,
    "mientras": TokenType.WHILE,
    "hacer": TokenType.DO,
    "y": TokenType.AND,
    "o": TokenType.OR,
    "no": TokenType.NOT,
    "función": TokenType.FUNCTION,
}


@dataclass
class Token:
    type: TokenType
    literal: str = ""
    line: int = 1
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.literal!r}, {self.line}:{self.column})"

    @property
    def lexeme(self) -> str:
        if not self.literal:
            return str(self.type)
        return self.literal
