"""Wires joining node ports to each other or to plain values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..value import InetError, format_value


class Wire:
    """One half of a connection; ``opposite`` is another wire or a value."""

    __slots__ = ("node", "index", "opposite")

    def __init__(self) -> None:
        self.node: Any = None
        self.index = 0
        self.opposite: Any = None

    def _port_info(self) -> Any:
        if self.node is None:
            raise InetError("wire is not attached to a node")
        port_info = self.node.ctor.port_infos[self.index]
        if port_info is None:
            raise InetError("wire is attached to an undescribed port")
        return port_info

    def name(self) -> str:
        return self._port_info().name

    def node_name(self) -> str:
        if self.node is None:
            raise InetError("wire is not attached to a node")
        return self.node.ctor.name

    def free_from_node(self) -> None:
        self.node = None

    def is_free(self) -> bool:
        return self.node is None

    def is_principal(self) -> bool:
        if self.node is None:
            return False
        return self._port_info().is_principal

    def _left_half(self) -> str:
        if self.node is None:
            return "-<"
        mark = "!" if self.is_principal() else ""
        return f"{self.node}-{self.name()}{mark}-<"

    def _right_half(self) -> str:
        if self.node is None:
            return ">-"
        mark = "!" if self.is_principal() else ""
        return f">-{mark}{self.name()}-{self.node}"

    def _opposite_text(self) -> str:
        if self.opposite is None:
            return ""
        if is_wire(self.opposite):
            return self.opposite._right_half()
        return f"[{format_value(self.opposite)}]"

    def __str__(self) -> str:
        return self._left_half() + self._opposite_text()

    def format_net(self) -> str:
        """Render every node reachable from this wire."""
        parts = ["<net>\n", f":root {format_value(self)}\n"]

        root = self.node
        if root is None and is_wire(self.opposite):
            root = self.opposite.node

        if root is not None:
            for node in iter_connected_nodes(root):
                lines = []
                for port_info, value in zip(node.ctor.port_infos, node.values):
                    mark = "!" if port_info.is_principal else ""
                    line = f" :{port_info.name}{mark} "
                    if value is not None:
                        if is_wire(value):
                            line += "-<" + value._opposite_text()
                        else:
                            line += format_value(value)
                    lines.append(line)
                parts.append(f"({node.label()}\n" + "\n".join(lines) + ")\n")

        parts.append("</net>\n")
        return "".join(parts)


def is_wire(value: Any) -> bool:
    return isinstance(value, Wire)


def link_wires() -> tuple[Wire, Wire]:
    """Return two free wires that are each other's opposite."""
    first, second = Wire(), Wire()
    first.opposite = second
    second.opposite = first
    return first, second


def iter_connected_nodes(root: Any) -> Iterator[Any]:
    """Yield the root node and every node reachable from it through wires."""
    if root is None:
        raise InetError("connected node iteration needs a root node")

    occurred: set[Any] = set()
    pending: list[Any] = []
    node = root
    while True:
        occurred.add(node)
        for value in node.values:
            if not is_wire(value):
                continue
            opposite = value.opposite
            if not is_wire(opposite) or opposite.node is None:
                continue
            neighbor = opposite.node
            if neighbor in occurred or any(p is neighbor for p in pending):
                continue
            pending.append(neighbor)
        yield node
        if not pending:
            return
        node = pending.pop()