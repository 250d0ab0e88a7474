"""Nodes of an interaction net."""

from __future__ import annotations

from typing import Any

from ..value import InetError
from .node_ctor import NodeCtor
from .wire import is_wire

_SUBSCRIPT_DIGITS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


def to_subscript(number: int) -> str:
    """Write a number with subscript digits."""
    return str(number).translate(_SUBSCRIPT_DIGITS)


class Node:
    """A node built by a constructor, holding one value per port."""

    __slots__ = ("ctor", "id", "values", "is_matched")

    def __init__(self, ctor: NodeCtor, id: int) -> None:
        self.ctor = ctor
        self.id = id
        self.values: list[Any] = [None] * ctor.arity
        self.is_matched = False

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.ctor.arity:
            raise InetError(
                f"port index {index} out of range for node {self.label()}"
            )

    def set_value(self, index: int, value: Any) -> None:
        self._check_index(index)
        self.values[index] = value
        if is_wire(value):
            value.node = self
            value.index = index

    def get_value(self, index: int) -> Any:
        self._check_index(index)
        return self.values[index]

    def label(self) -> str:
        return f"{self.ctor.name}{to_subscript(self.id)}"

    def is_primitive(self) -> bool:
        return self.ctor.primitive is not None

    def __str__(self) -> str:
        return f"({self.label()})"