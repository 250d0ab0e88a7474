import pytest

from inetlisp.net.node import Node
from inetlisp.net.node_ctor import NodeCtor
from inetlisp.net.port_info import PortInfo
from inetlisp.net.wire import Wire, is_wire, iter_connected_nodes, link_wires
from inetlisp.value import InetError, format_value, xint


def _ctor(name, *ports):
    ctor = NodeCtor(name, len(ports))
    ctor.port_infos = [PortInfo.from_name(p) for p in ports]
    return ctor


def _connect(node_a, index_a, node_b, index_b):
    first, second = link_wires()
    node_a.set_value(index_a, first)
    node_b.set_value(index_b, second)
    return first, second


def test_link_wires_are_opposite_and_free():
    first, second = link_wires()
    assert first.opposite is second
    assert second.opposite is first
    assert first.is_free() and second.is_free()
    assert not first.is_principal()
    assert is_wire(first)
    assert not is_wire(xint(1))


def test_free_wire_str():
    first, _ = link_wires()
    assert str(first) == "-<>-"


def test_wire_to_value_str():
    wire = Wire()
    wire.opposite = xint(1)
    assert str(wire) == "-<[" + format_value(xint(1)) + "]"


def test_name_of_free_wire_raises():
    with pytest.raises(InetError):
        Wire().name()
    with pytest.raises(InetError):
        Wire().node_name()


def test_attached_wire_names_and_str():
    a = Node(_ctor("zero", "value!"), 1)
    b = Node(_ctor("add1", "target!", "result"), 2)
    first, second = _connect(a, 0, b, 0)
    assert first.name() == "value"
    assert first.node_name() == "zero"
    assert first.is_principal() and second.is_principal()
    assert str(first) == f"{a}-value!-<>-!target-{b}"
    first.free_from_node()
    assert first.is_free()


def test_iter_connected_nodes_chain():
    ctor = _ctor("pass", "in!", "out")
    a, b, c = Node(ctor, 1), Node(ctor, 2), Node(ctor, 3)
    _connect(a, 1, b, 0)
    _connect(b, 1, c, 0)
    nodes = list(iter_connected_nodes(a))
    assert nodes[0] is a
    assert len(nodes) == 3
    assert {id(n) for n in nodes} == {id(a), id(b), id(c)}


def test_iter_connected_nodes_cycle_visits_each_once():
    ctor = _ctor("pass", "in!", "out")
    a, b = Node(ctor, 1), Node(ctor, 2)
    _connect(a, 1, b, 0)
    _connect(b, 1, a, 0)
    nodes = list(iter_connected_nodes(b))
    assert nodes[0] is b
    assert len(nodes) == 2


def test_iter_connected_nodes_needs_root():
    with pytest.raises(InetError):
        list(iter_connected_nodes(None))


def test_format_net():
    a = Node(_ctor("zero", "value!"), 1)
    b = Node(_ctor("add1", "target!", "result"), 2)
    first, _ = _connect(a, 0, b, 0)
    text = first.format_net()
    assert text.startswith("<net>\n:root " + str(first) + "\n")
    assert "(" + a.label() + "\n :value! -<" in text
    assert "(" + b.label() + "\n :target! -<" in text
    assert "\n :result )\n" in text
    assert text.endswith("</net>\n")


def test_format_net_of_value_wire_has_no_nodes():
    wire = Wire()
    wire.opposite = xint(1)
    assert wire.format_net() == "<net>\n:root " + str(wire) + "\n</net>\n"