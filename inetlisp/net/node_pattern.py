"""Node patterns: the left-hand sides that rules match against."""

from __future__ import annotations

from typing import Any

from .port_info import PortInfo


class NodePattern:
    """A constructor together with a name for each of its ports."""

    def __init__(self, ctor: Any) -> None:
        self.ctor = ctor
        self.port_infos: list[PortInfo | None] = [None] * ctor.arity

    def set_port_info(self, index: int, port_info: PortInfo) -> bool:
        """Name a port; refuse when its principal mark disagrees with the constructor."""
        ctor_port_info = self.ctor.port_infos[index]
        expected = ctor_port_info.is_principal if ctor_port_info is not None else False
        if port_info.is_principal != expected:
            return False
        self.port_infos[index] = port_info
        return True

    def has_principal_name(self, name: str) -> bool:
        return any(
            port_info is not None and port_info.is_principal and port_info.name == name
            for port_info in self.port_infos
        )

    def __str__(self) -> str:
        ports = "".join(f" {port_info}" for port_info in self.port_infos)
        return f"({self.ctor.name}{ports})"