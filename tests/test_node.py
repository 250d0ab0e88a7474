import unicodedata

import pytest

from inetlisp.net.node import Node, to_subscript
from inetlisp.net.node_ctor import NodeCtor
from inetlisp.net.port_info import PortInfo
from inetlisp.net.wire import Wire
from inetlisp.value import InetError, xint


def _ctor():
    ctor = NodeCtor("add", 3)
    ctor.port_infos = [PortInfo.from_name(n) for n in ("target!", "addend", "result")]
    return ctor


def test_new_node_has_empty_ports():
    node = Node(_ctor(), 1)
    assert node.get_value(0) is None
    assert node.get_value(2) is None
    assert node.is_matched is False


def test_set_value_plain():
    node = Node(_ctor(), 1)
    node.set_value(1, xint(4))
    assert node.get_value(1) == xint(4)


def test_set_value_wire_attaches_it():
    node = Node(_ctor(), 1)
    wire = Wire()
    node.set_value(2, wire)
    assert wire.node is node
    assert wire.index == 2
    assert wire.name() == "result"
    assert not wire.is_principal()


def test_index_out_of_range_raises():
    node = Node(_ctor(), 1)
    with pytest.raises(InetError):
        node.get_value(3)
    with pytest.raises(InetError):
        node.set_value(-1, xint(1))


def test_label_and_str():
    node = Node(_ctor(), 12)
    assert node.label() == "add" + to_subscript(12)
    assert str(node) == "(" + node.label() + ")"


def test_is_primitive_follows_ctor():
    ctor = _ctor()
    node = Node(ctor, 1)
    assert node.is_primitive() is False
    ctor.primitive = object()
    assert node.is_primitive() is True