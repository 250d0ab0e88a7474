"""Frames: a function being run, with its linear local variables."""

from __future__ import annotations

from typing import Any

from ..value import InetError, format_value
from .function import Function
from .opcode import Opcode


class Frame:
    """A cursor into a function plus the variables it has bound."""

    def __init__(self, function: Function) -> None:
        self.cursor = 0
        self.function = function
        self.variables: dict[int, Any] = {}

    def is_finished(self) -> bool:
        return self.cursor == len(self.function)

    def fetch_opcode(self) -> Opcode:
        opcode = self.function[self.cursor]
        self.cursor += 1
        return opcode

    def get_variable(self, index: int) -> Any:
        """Take a variable's value; each variable is used exactly once."""
        if index not in self.variables:
            raise InetError(f"[frame_get_variable] undefined variable index: {index}")
        return self.variables.pop(index)

    def set_variable(self, index: int, value: Any) -> None:
        if index in self.variables:
            found = format_value(self.variables[index])
            raise InetError(
                f"[frame_set_variable] variable index is already used: {index}, "
                f"found value: {found}"
            )
        self.variables[index] = value

    def __str__(self) -> str:
        parts = [
            f'<frame cursor="{self.cursor}">\n',
            self.function.format_with_cursor(self.cursor),
            "<variable-array>\n",
        ]
        for index in sorted(self.variables):
            parts.append(f"{index}: {format_value(self.variables[index])}\n")
        parts.append("</variable-array>\n</frame>\n")
        return "".join(parts)