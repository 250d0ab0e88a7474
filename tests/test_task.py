import pytest

from inetlisp.core.function import Function
from inetlisp.core.primitive import Primitive
from inetlisp.core.rule import Rule
from inetlisp.core.task import (
    Task,
    maybe_return_task_by_node,
    maybe_return_task_by_node_and_neighbor,
)
from inetlisp.net.net_pattern import NetPattern
from inetlisp.net.node import Node
from inetlisp.net.node_ctor import NodeCtor
from inetlisp.net.node_pattern import NodePattern
from inetlisp.net.port_info import PortInfo
from inetlisp.net.wire import Wire, link_wires
from inetlisp.value import InetError, xint_add


class FakeWorker:
    def __init__(self):
        self.tasks = []

    def add_task(self, task):
        self.tasks.insert(0, task)


def _ctor(name, port_names):
    ctor = NodeCtor(name, len(port_names))
    ctor.port_infos[:] = [PortInfo.from_name(p) for p in port_names]
    return ctor


def _pattern(ctor, port_names):
    pattern = NodePattern(ctor)
    for index, port_name in enumerate(port_names):
        assert pattern.set_port_info(index, PortInfo.from_name(port_name))
    return pattern


def _zero_add_net(add_has_rule=True):
    zero = _ctor("zero", ["value!"])
    add = _ctor("add", ["target!", "addend", "result"])
    net_pattern = NetPattern(
        [_pattern(zero, ["x!"]), _pattern(add, ["x!", "addend", "result"])]
    )
    function = Function(2, "add-zero")
    zero.rules.append(Rule(0, net_pattern, function))
    if add_has_rule:
        add.rules.append(Rule(1, net_pattern, function))

    zero_node = Node(zero, 1)
    add_node = Node(add, 2)
    first, second = link_wires()
    zero_node.set_value(0, first)
    add_node.set_value(0, second)
    add_node.set_value(1, 5)
    result, _free = link_wires()
    add_node.set_value(2, result)
    return zero_node, add_node


def test_rule_task_marks_matched_nodes():
    zero_node, add_node = _zero_add_net()
    worker = FakeWorker()
    maybe_return_task_by_node(worker, zero_node)
    assert len(worker.tasks) == 1
    task = worker.tasks[0]
    assert not task.is_primitive()
    assert task.rule.starting_index == 0
    assert task.net_matcher.matched_nodes == [zero_node, add_node]
    assert task.net_matcher.values["addend"] == 5
    assert zero_node.is_matched and add_node.is_matched


def test_matched_node_gives_no_second_task():
    zero_node, add_node = _zero_add_net()
    worker = FakeWorker()
    maybe_return_task_by_node(worker, zero_node)
    maybe_return_task_by_node(worker, add_node)
    assert len(worker.tasks) == 1


def test_neighbor_is_activated():
    zero_node, add_node = _zero_add_net(add_has_rule=False)
    worker = FakeWorker()
    maybe_return_task_by_node(worker, add_node)
    assert worker.tasks == []
    maybe_return_task_by_node_and_neighbor(worker, add_node)
    assert len(worker.tasks) == 1
    assert worker.tasks[0].net_matcher.matched_nodes[0] is zero_node


def _iadd_node():
    ctor = _ctor("iadd", ["x!", "y!", "result"])
    ctor.primitive = Primitive.from_value_fn("iadd", 2, xint_add)
    node = Node(ctor, 1)
    result, _free = link_wires()
    node.set_value(2, result)
    return node


def test_primitive_node_with_values_is_ready():
    node = _iadd_node()
    node.set_value(0, 1)
    node.set_value(1, 2)
    worker = FakeWorker()
    maybe_return_task_by_node(worker, node)
    assert len(worker.tasks) == 1
    assert worker.tasks[0].is_primitive()
    assert worker.tasks[0].primitive_node is node
    assert node.is_matched


def test_primitive_node_with_wire_to_value_is_ready():
    node = _iadd_node()
    wire = Wire()
    wire.opposite = 7
    node.set_value(0, wire)
    node.set_value(1, 2)
    worker = FakeWorker()
    maybe_return_task_by_node(worker, node)
    assert [task.primitive_node for task in worker.tasks] == [node]


def test_primitive_node_with_open_wire_is_not_ready():
    node = _iadd_node()
    first, _second = link_wires()
    node.set_value(0, first)
    node.set_value(1, 2)
    worker = FakeWorker()
    maybe_return_task_by_node(worker, node)
    assert worker.tasks == []
    assert not node.is_matched


def test_primitive_task_needs_primitive_node():
    node = Node(_ctor("zero", ["value!"]), 1)
    with pytest.raises(InetError):
        Task(primitive_node=node)


def test_task_str_wraps_rule_and_matcher():
    zero_node, _add_node = _zero_add_net()
    worker = FakeWorker()
    maybe_return_task_by_node(worker, zero_node)
    task = worker.tasks[0]
    text = str(task)
    assert text.startswith("<task>\n")
    assert str(task.rule) in text
    assert str(task.net_matcher) in text
    assert text.endswith("</task>\n")