"""Opcodes executed by a worker's frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..value import format_value


@dataclass(frozen=True)
class Apply:
    """Pop a target and apply it to ``arity`` values on the stack."""

    arity: int

    def __str__(self) -> str:
        return f"(apply {self.arity})"


@dataclass(frozen=True)
class Literal:
    """Push a constant value."""

    value: Any

    def __str__(self) -> str:
        return f"(literal {format_value(self.value)})"


@dataclass(frozen=True)
class GetVariable:
    """Push a local variable, consuming it."""

    index: int

    def __str__(self) -> str:
        return f"(get-variable {self.index})"


@dataclass(frozen=True)
class SetVariable:
    """Pop a value into a local variable."""

    index: int

    def __str__(self) -> str:
        return f"(set-variable {self.index})"


Opcode = Union[Apply, Literal, GetVariable, SetVariable]