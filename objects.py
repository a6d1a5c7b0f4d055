"""Runtime values and environments.

This module defines the `ObjectType` enum, one dataclass per runtime value
kind (`IntegerObject`, `BooleanObject`, `FunctionObject`) and `Environment`,
the flat name-to-value mapping a scope evaluates in. The evaluator uses
`None` as the "no value" result; `render(None)` is the empty string.

Integers behave like signed 64-bit machine integers: `wrap_int64` folds any
Python int into that range with two's complement wrapping.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, Optional
from ast_nodes import FunctionNode

INT64_MIN = -(2**63)


def wrap_int64(value: int) -> int:
    return (value - INT64_MIN) % 2**64 + INT64_MIN


def int64_from_decimal(digits: str) -> int:
    """Wrapped value of a decimal literal of any length."""
    value = 0
    # Chunks stay well under the interpreter's int/str conversion limit.
    for start in range(0, len(digits), 18):
        chunk = digits[start : start + 18]
        value = (value * 10 ** len(chunk) + int(chunk)) % 2**64
    return wrap_int64(value)


class ObjectType(Enum):
    INTEGER = auto()
    BOOLEAN = auto()
    FUNCTION = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Object:
    type: ObjectType

    def inspect(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.inspect()


@dataclass
class IntegerObject(Object):
    type: ObjectType = ObjectType.INTEGER
    value: int = 0

    def inspect(self) -> str:
        return str(self.value)


@dataclass
class BooleanObject(Object):
    type: ObjectType = ObjectType.BOOLEAN
    value: bool = False

    def inspect(self) -> str:
        return "verdadero" if self.value else "falso"


@dataclass
class FunctionObject(Object):
    type: ObjectType = ObjectType.FUNCTION
    # Refers to the defining node; the program tree outlives evaluation.
    function: FunctionNode = field(default_factory=FunctionNode)

    def inspect(self) -> str:
        return "Objeto de tipo función"


def render(value: Optional[Object]) -> str:
    """Human-readable text for a value; no value renders as nothing."""
    if value is None:
        return ""
    return value.inspect()


class Environment:
    """A single flat scope. Function calls get a fresh one, never a child."""

    def __init__(self) -> None:
        self.store: Dict[str, Optional[Object]] = {}

    def get(self, name: str) -> Optional[Object]:
        return self.store.get(name)

    def set(self, name: str, value: Optional[Object]) -> None:
        self.store[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.store

    def __repr__(self) -> str:
        return f"Environment({self.store!r})"
