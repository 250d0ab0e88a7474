"""Node constructors: the kinds of node a net can hold."""

from __future__ import annotations

from typing import Any

from ..value import InetError
from .port_info import PortInfo


class NodeCtor:
    """A node kind with a fixed number of ports and the rules that rewrite it."""

    def __init__(self, name: str, arity: int) -> None:
        self.name = name
        self.arity = arity
        self.port_infos: list[PortInfo | None] = [None] * arity
        self.rules: list[Any] = []
        self.primitive: Any = None

    def find_port_index(self, port_name: str) -> int:
        for index, port_info in enumerate(self.port_infos):
            if port_info is not None and port_info.name == port_name:
                return index
        raise InetError(
            f"[node_ctor_find_port_index] fail to find index of "
            f"node_name: {self.name}, port_name: {port_name}"
        )

    def __str__(self) -> str:
        return f"({self.name})"