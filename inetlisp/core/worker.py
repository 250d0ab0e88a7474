"""Workers: the inner interpreter that builds nets and rewrites them."""

from __future__ import annotations

from collections import deque
from typing import Any

from ..net.net_matcher import NetMatcher
from ..net.node import Node
from ..net.node_ctor import NodeCtor
from ..net.wire import Wire, is_wire, link_wires
from ..value import InetError, format_value
from .frame import Frame
from .function import Function
from .opcode import Apply, GetVariable, Literal, Opcode, SetVariable
from .primitive import Primitive
from .task import Task, maybe_return_task_by_node, maybe_return_task_by_node_and_neighbor


class Worker:
    """A value stack, a return stack of frames and a queue of pending tasks.

    With ``track_nodes`` the worker also keeps every live node it created,
    so that a viewer can show the net.
    """

    def __init__(self, mod: Any, track_nodes: bool = False) -> None:
        self.mod = mod
        self.track_nodes = track_nodes
        self.tasks: deque[Task] = deque()
        self.value_stack: list[Any] = []
        self.return_stack: list[Frame] = []
        self.node_id_count = 0
        self.fresh_name_count = 0
        self.player_nodes: dict[Node, None] = {}

    # nodes and names

    def new_node(self, ctor: NodeCtor) -> Node:
        self.node_id_count += 1
        node = Node(ctor, self.node_id_count)
        if self.track_nodes:
            self.player_nodes[node] = None
        return node

    def recycle_node(self, node: Node) -> None:
        if self.track_nodes:
            self.player_nodes.pop(node, None)

    def fresh_name(self) -> str:
        name = str(self.fresh_name_count)
        self.fresh_name_count += 1
        return name

    # stack helpers

    def _pop(self) -> Any:
        if not self.value_stack:
            raise InetError("value stack is empty")
        return self.value_stack.pop()

    def _pick(self, index: int) -> Any:
        if index >= len(self.value_stack):
            raise InetError(f"value stack has no value at depth {index}")
        return self.value_stack[-1 - index]

    # applying

    def _is_directly_appliable(self, primitive: Primitive, arity: int) -> bool:
        if primitive.input_arity != arity:
            return False
        for index in range(primitive.input_arity):
            ctor = primitive.node_ctor
            if ctor is None or ctor.port_infos[index].is_principal:
                if is_wire(self._pick(index)):
                    return False
        return True

    def _apply_primitive_directly(self, primitive: Primitive) -> None:
        if primitive.takes_worker:
            primitive.fn(self)
            return
        args = [self._pop() for _ in range(primitive.input_arity)]
        args.reverse()
        self.value_stack.append(primitive.fn(*args))

    def apply(self, target: Any, arity: int) -> None:
        """Apply a node constructor, function or primitive to stack values."""
        if isinstance(target, NodeCtor):
            node = self.new_node(target)
            self.reconnect_node(node, arity)
        elif isinstance(target, Function):
            if target.arity != arity:
                raise InetError(
                    f"[apply] function {target} takes {target.arity} "
                    f"arguments, not {arity}"
                )
            self.return_stack.append(Frame(target))
        elif isinstance(target, Primitive):
            if target.input_arity != arity:
                raise InetError(
                    f"[apply] primitive {target} takes {target.input_arity} "
                    f"arguments, not {arity}"
                )
            if target.node_ctor is None or self._is_directly_appliable(target, arity):
                self._apply_primitive_directly(target)
            else:
                node = self.new_node(target.node_ctor)
                self.reconnect_node(node, arity)
        else:
            raise InetError(f"[apply] unknown target: {format_value(target)}")

    # running frames

    def _step_op(self, frame: Frame, op: Opcode) -> None:
        if isinstance(op, Apply):
            target = self._pop()
            self.apply(target, op.arity)
        elif isinstance(op, Literal):
            self.value_stack.append(op.value)
        elif isinstance(op, GetVariable):
            self.value_stack.append(frame.get_variable(op.index))
        elif isinstance(op, SetVariable):
            frame.set_variable(op.index, self._pop())
        else:
            raise InetError(f"unknown opcode: {op}")

    def _step(self) -> None:
        if not self.return_stack:
            return
        frame = self.return_stack.pop()
        if frame.is_finished():
            return
        op = frame.fetch_opcode()
        # proper tail call: a finished frame is not pushed back
        if not frame.is_finished():
            self.return_stack.append(frame)
        self._step_op(frame, op)

    def run_until(self, return_stack_base: int) -> None:
        """Step until the return stack shrinks back to ``return_stack_base``."""
        while len(self.return_stack) > return_stack_base:
            self._step()

    # tasks

    def add_task(self, task: Task) -> None:
        self.tasks.appendleft(task)

    def _handle_by_primitive(self, task: Task) -> None:
        node = task.primitive_node
        primitive = node.ctor.primitive
        if primitive is None:
            raise InetError("primitive task without a primitive")

        for index in range(primitive.input_arity):
            value = node.get_value(index)
            if is_wire(value):
                if is_wire(value.opposite):
                    raise InetError(
                        f"[handle_by_primitive] input port {index} of "
                        f"{node} is not ready"
                    )
                self.value_stack.append(value.opposite)
                value.free_from_node()
            else:
                self.value_stack.append(value)

        self.apply(primitive, primitive.input_arity)

        arity = primitive.input_arity + primitive.output_arity
        for count in range(primitive.output_arity):
            wire = node.get_value(arity - 1 - count)
            if not is_wire(wire):
                raise InetError(
                    f"[handle_by_primitive] output port of {node} is not a wire"
                )
            self.connect(wire, self._pop())

        self.recycle_node(node)

    def _return_local_values(self, matcher: NetMatcher) -> None:
        for name in matcher.net_pattern.local_names:
            if name not in matcher.values:
                raise InetError(f"[handle_by_rule] unbound local name: {name}")
            value = matcher.values[name]
            if is_wire(value):
                value.free_from_node()
            self.value_stack.append(value)

    def _delete_matched_nodes(self, matcher: NetMatcher) -> None:
        for node in matcher.matched_nodes:
            if node is None:
                raise InetError("[handle_by_rule] unmatched node in task")
            self.recycle_node(node)

    def _handle_by_rule(self, task: Task) -> None:
        self._return_local_values(task.net_matcher)
        self._delete_matched_nodes(task.net_matcher)
        base = len(self.return_stack)
        self.return_stack.append(Frame(task.rule.function))
        self.run_until(base)

    def handle_task(self, task: Task) -> None:
        if task.is_primitive():
            self._handle_by_primitive(task)
        else:
            self._handle_by_rule(task)

    def work(self) -> None:
        """Handle tasks until none are left."""
        while self.tasks:
            self.handle_task(self.tasks.pop())

    # connecting

    def _connect_wire(self, first: Wire, second: Wire) -> Wire:
        first_opposite = first.opposite
        second_opposite = second.opposite

        if is_wire(first_opposite) and is_wire(second_opposite):
            first_opposite.opposite = second_opposite
            second_opposite.opposite = first_opposite
            if first_opposite.node is not None:
                maybe_return_task_by_node(self, first_opposite.node)
            if second_opposite.node is not None:
                maybe_return_task_by_node(self, second_opposite.node)
            return first_opposite

        if is_wire(first_opposite):
            first_opposite.opposite = second_opposite
            if first_opposite.node is not None:
                maybe_return_task_by_node(self, first_opposite.node)
            return first_opposite

        if is_wire(second_opposite):
            second_opposite.opposite = first_opposite
            if second_opposite.node is not None:
                maybe_return_task_by_node(self, second_opposite.node)
            return second_opposite

        raise InetError(
            "[connect_wire] can not connect wires with non-wire opposite, "
            f"first_opposite: {format_value(first_opposite)}, "
            f"second_opposite: {format_value(second_opposite)}"
        )

    def connect(self, wire: Wire, value: Any) -> Wire:
        """Join ``wire`` to ``value``; return the wire left standing."""
        if is_wire(value):
            return self._connect_wire(wire, value)

        opposite = wire.opposite
        if not is_wire(opposite):
            raise InetError(
                "[worker_connect] can not connect wire with non-wire opposite "
                f"to value, opposite: {format_value(opposite)}"
            )
        opposite.opposite = value
        if opposite.node is not None:
            maybe_return_task_by_node(self, opposite.node)
        return opposite

    def reconnect_node(self, node: Node, arity: int) -> None:
        """Fill the first ``arity`` ports from the stack, push wires for the rest."""
        if arity > node.ctor.arity:
            raise InetError(
                f"[reconnect_node] {node} has {node.ctor.arity} ports, "
                f"can not take {arity} inputs"
            )
        for index in reversed(range(arity)):
            node.set_value(index, self._pop())

        for index in range(arity, node.ctor.arity):
            node_wire, free_wire = link_wires()
            node.set_value(index, node_wire)
            self.value_stack.append(free_wire)

        maybe_return_task_by_node_and_neighbor(self, node)

    # printing

    def format_return_stack(self) -> str:
        frames = "".join(str(frame) for frame in self.return_stack)
        return (
            f'<return-stack length="{len(self.return_stack)}">\n'
            f"{frames}</return-stack>\n"
        )

    def format_value_stack(self) -> str:
        values = "".join(f"{format_value(value)}\n" for value in self.value_stack)
        return (
            f'<value-stack length="{len(self.value_stack)}">\n'
            f"{values}</value-stack>\n"
        )

    def __str__(self) -> str:
        tasks = "".join(str(task) for task in self.tasks)
        return (
            "<worker>\n"
            f'<task-queue length="{len(self.tasks)}">\n'
            f"{tasks}</task-queue>\n"
            f"{self.format_return_stack()}"
            f"{self.format_value_stack()}"
            "</worker>\n"
        )