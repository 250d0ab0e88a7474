"""Tasks: redexes found in the net, waiting to be rewritten."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..net.net_matcher import NetMatcher, match_net
from ..net.node import Node
from ..net.wire import is_wire
from ..value import InetError
from .rule import Rule


@dataclass(eq=False)
class Task:
    """Either a matched rule with its matcher, or a ready primitive node."""

    rule: Rule | None = None
    net_matcher: NetMatcher | None = None
    primitive_node: Node | None = None

    def __post_init__(self) -> None:
        if self.primitive_node is not None and not self.primitive_node.is_primitive():
            raise InetError("a primitive task needs a primitive node")

    def is_primitive(self) -> bool:
        return self.primitive_node is not None

    def __str__(self) -> str:
        if self.is_primitive():
            return f"<task>\n{self.primitive_node}\n</task>\n"
        return f"<task>\n{self.rule}{self.net_matcher}</task>\n"


def _by_primitive_node(worker: Any, node: Node) -> None:
    for port_info, value in zip(node.ctor.port_infos, node.values):
        if not port_info.is_principal:
            continue
        # a principal port is ready when it holds a value,
        # or a wire whose opposite is a value
        if is_wire(value) and is_wire(value.opposite):
            return

    worker.add_task(Task(primitive_node=node))
    node.is_matched = True


def _by_matched_node(worker: Any, node: Node) -> None:
    for rule in node.ctor.rules:
        matcher = match_net(rule.net_pattern, rule.starting_index, node)
        if matcher is not None:
            worker.add_task(Task(rule=rule, net_matcher=matcher))
            for matched_node in matcher.matched_nodes:
                matched_node.is_matched = True
            return


def maybe_return_task_by_node(worker: Any, node: Node) -> None:
    """Add a task to ``worker`` if ``node`` is part of a redex."""
    if node is None:
        raise InetError("can not look for a task without a node")
    if node.is_matched:
        return
    if node.is_primitive():
        _by_primitive_node(worker, node)
    else:
        _by_matched_node(worker, node)


def maybe_return_task_by_node_and_neighbor(worker: Any, node: Node) -> None:
    """Look for tasks at ``node`` and at every node wired to it.

    A node whose constructor was imported may have no rules visible here,
    so its neighbors are tried as well.
    """
    maybe_return_task_by_node(worker, node)
    for value in node.values:
        if not is_wire(value):
            continue
        opposite = value.opposite
        if is_wire(opposite) and opposite.node is not None:
            maybe_return_task_by_node(worker, opposite.node)