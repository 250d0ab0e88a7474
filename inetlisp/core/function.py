"""Compiled functions: sequences of opcodes run by a worker."""

from __future__ import annotations

from .opcode import Opcode


class Function:
    """A named body of opcodes taking ``arity`` values from the stack."""

    def __init__(self, arity: int, name: str | None = None) -> None:
        self.arity = arity
        self.name = name
        self.local_indexes: dict[str, int] = {}
        self.opcodes: list[Opcode] = []

    def add_opcode(self, opcode: Opcode) -> None:
        self.opcodes.append(opcode)

    def __len__(self) -> int:
        return len(self.opcodes)

    def __getitem__(self, index: int) -> Opcode:
        return self.opcodes[index]

    def format_with_cursor(self, cursor: int | None = None) -> str:
        """List the opcodes, marking the one at ``cursor`` with ``<<<``."""
        lines = [f"<function {self.name or ''}>\n"]
        for index, opcode in enumerate(self.opcodes):
            marker = " <<<" if index == cursor else ""
            lines.append(f"{opcode}{marker}\n")
        lines.append("</function>\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.name or ""