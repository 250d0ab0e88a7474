"""Port descriptions of node constructors and node patterns."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PortInfo:
    """A named port; a trailing ``!`` in source marks it principal."""

    name: str
    is_principal: bool = False

    @classmethod
    def from_name(cls, name: str) -> PortInfo:
        if name.endswith("!"):
            return cls(name[:-1], True)
        return cls(name, False)

    def __str__(self) -> str:
        return f"{self.name}!" if self.is_principal else self.name