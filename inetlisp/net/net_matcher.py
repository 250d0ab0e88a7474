"""Matching a net pattern against the nodes of a live net."""

from __future__ import annotations

from typing import Any

from ..value import InetError, format_value
from .net_pattern import NetPattern
from .wire import is_wire


def _match_value(first: Any, second: Any) -> bool:
    if is_wire(first) and first.opposite is second:
        return True
    if not is_wire(first) and not is_wire(second):
        return first is second or (type(first) is type(second) and first == second)
    return False


class NetMatcher:
    """The state of one attempt to match a net pattern."""

    def __init__(self, net_pattern: NetPattern) -> None:
        self.net_pattern = net_pattern
        self.values: dict[str, Any] = {}
        self.matched_nodes: list[Any] = [None] * len(net_pattern)
        self.principal_names: list[str] = []
        self.matched_principal_names: list[str] = []

    def _match_node(self, index: int, node: Any) -> None:
        node_pattern = self.net_pattern[index]
        if node_pattern.ctor is not node.ctor:
            return

        for port_info, value in zip(node_pattern.port_infos, node.values):
            if value is None:
                return
            name = port_info.name
            if port_info.is_principal:
                if name in self.values:
                    if not _match_value(value, self.values[name]):
                        return
                else:
                    self.principal_names.append(name)
                    self.values[name] = value
            else:
                if name in self.values:
                    return
                self.values[name] = value

        self.matched_nodes[index] = node

    def _next_principal_name(self) -> str | None:
        if not self.principal_names:
            return None
        name = self.principal_names.pop()
        self.matched_principal_names.append(name)
        return name

    def _next_index(self, name: str) -> int:
        for index, node_pattern in enumerate(self.net_pattern.node_patterns):
            if (
                node_pattern.has_principal_name(name)
                and self.matched_nodes[index] is None
            ):
                return index
        raise InetError(f"[matcher_next_index] can not find index for name: {name}")

    def _next_node(self, name: str) -> Any:
        value = self.values.get(name)
        if not is_wire(value):
            return None
        opposite = value.opposite
        if not is_wire(opposite) or opposite.node is None:
            return None
        return opposite.node

    def _start(self, starting_index: int, node: Any) -> None:
        self._match_node(starting_index, node)
        name = self._next_principal_name()
        while name is not None:
            node = self._next_node(name)
            if node is None or node.is_matched:
                return
            index = self._next_index(name)
            self._match_node(index, node)
            name = self._next_principal_name()

    def is_success(self) -> bool:
        return all(node is not None for node in self.matched_nodes)

    def __str__(self) -> str:
        parts = ["<net-matcher>\n", str(self.net_pattern), "<value-hash>\n"]
        for name, value in self.values.items():
            parts.append(f"{name}:\n  {format_value(value)}\n")
        parts.append("</value-hash>\n<matched-nodes>\n")
        for index, node in enumerate(self.matched_nodes):
            parts.append(f"{index}: NULL\n" if node is None else f"{index}: {node}\n")
        parts.append("</matched-nodes>\n")
        parts.append(
            f"<principal-name-list>{', '.join(self.principal_names)}"
            "</principal-name-list>\n"
        )
        parts.append(
            f"<matched-principal-name-list>{', '.join(self.matched_principal_names)}"
            "</matched-principal-name-list>\n"
        )
        parts.append("</net-matcher>\n")
        return "".join(parts)


def match_net(net_pattern: NetPattern, starting_index: int, node: Any) -> NetMatcher | None:
    """Match the pattern starting from ``node``; return the matcher or None."""
    matcher = NetMatcher(net_pattern)
    matcher._start(starting_index, node)
    if not matcher.is_success():
        return None
    return matcher