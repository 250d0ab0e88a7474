"""Modules: compilation units holding named values."""

from __future__ import annotations

from typing import Any

from ..value import format_value


class Mod:
    """A loaded source file and the values it defines, like a forth dictionary."""

    def __init__(self, path: Any, code: str) -> None:
        self.path = path
        self.code = code
        self.values: dict[str, Any] = {}
        # the worker that loaded this mod
        self.loader_worker: Any = None

    def find(self, name: str) -> Any:
        return self.values.get(name)

    def __str__(self) -> str:
        lines = [f'<mod value-count="{len(self.values)}">\n']
        lines.extend(f"{format_value(value)}\n" for value in self.values.values())
        lines.append("</mod>\n")
        return "".join(lines)