"""Diagnostics collected while parsing and evaluating.

Errors never interrupt the interpreter: the parser stops at the first bad
form and the evaluator turns a failing sub-evaluation into "no value". Both
record what went wrong here so drivers and tests can report it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Literal

Kind = Literal["lexical", "syntactic", "semantic"]


@dataclass(frozen=True)
class Diagnostic:
    kind: Kind
    message: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return (
            f"{self.kind} error at line {self.line}, column {self.column}: "
            f"{self.message}"
        )


class Diagnostics:
    def __init__(self) -> None:
        self.items: List[Diagnostic] = []

    def report(self, kind: Kind, message: str, line: int = 0, column: int = 0) -> None:
        self.items.append(Diagnostic(kind, message, line, column))

    def extend(self, other: Diagnostics) -> None:
        self.items.extend(other.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)
