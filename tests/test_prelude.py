import pytest

from inetlisp.core.function import Function
from inetlisp.core.mod import Mod
from inetlisp.core.primitive import Primitive
from inetlisp.core.worker import Worker
from inetlisp.net.wire import is_wire, link_wires
from inetlisp.prelude import (
    import_prelude,
    x_assert,
    x_connect,
    x_eq,
    x_fn_dup,
    x_link,
    xfloat_dup,
    xint_dup,
)
from inetlisp.value import InetError


def _worker():
    mod = Mod("test.inet", "")
    import_prelude(mod)
    return Worker(mod)


def test_prelude_defines_booleans():
    worker = _worker()
    assert worker.mod.find("true") is True
    assert worker.mod.find("false") is False


def test_prelude_primitive_has_node_form():
    worker = _worker()
    iadd = worker.mod.find("iadd")
    assert isinstance(iadd, Primitive)
    assert iadd.node_ctor.arity == 3
    assert [p.is_principal for p in iadd.node_ctor.port_infos] == [True, True, False]
    assert iadd.node_ctor.primitive is iadd


def test_connect_has_no_node_form():
    worker = _worker()
    connect = worker.mod.find("connect")
    assert connect.node_ctor is None
    assert (connect.input_arity, connect.output_arity) == (2, 0)


def test_prelude_can_not_be_imported_twice():
    mod = Mod("test.inet", "")
    import_prelude(mod)
    with pytest.raises(InetError):
        import_prelude(mod)


def test_eq():
    assert x_eq(1, 1) is True
    assert x_eq(1, 2) is False
    assert x_eq(1, True) is False
    assert x_eq(1, 1.0) is False
    assert x_eq(2.5, 2.5) is True


def test_link_pushes_opposite_wires():
    worker = _worker()
    x_link(worker)
    first, second = worker.value_stack
    assert first.opposite is second and second.opposite is first


def test_connect_wire_to_value():
    worker = _worker()
    first, second = link_wires()
    worker.value_stack.extend([first, 9])
    x_connect(worker)
    assert second.opposite == 9
    assert worker.value_stack == []


def test_connect_value_to_wire():
    worker = _worker()
    first, second = link_wires()
    worker.value_stack.extend([9, first])
    x_connect(worker)
    assert second.opposite == 9


def test_connect_values_raises():
    worker = _worker()
    worker.value_stack.extend([1, 2])
    with pytest.raises(InetError):
        x_connect(worker)


def test_assert_true_pops():
    worker = _worker()
    worker.value_stack.append(True)
    x_assert(worker)
    assert worker.value_stack == []


def test_assert_false_raises():
    worker = _worker()
    worker.value_stack.append(False)
    with pytest.raises(InetError, match="assert"):
        x_assert(worker)


def test_fn_dup():
    worker = _worker()
    function = Function(0, "f")
    worker.value_stack.append(function)
    x_fn_dup(worker)
    assert worker.value_stack == [function, function]


def test_fn_dup_rejects_non_function():
    worker = _worker()
    worker.value_stack.append(3)
    with pytest.raises(InetError):
        x_fn_dup(worker)


def test_int_dup():
    worker = _worker()
    worker.value_stack.append(3)
    xint_dup(worker)
    assert worker.value_stack == [3, 3]


def test_int_dup_rejects_float():
    worker = _worker()
    worker.value_stack.append(3.0)
    with pytest.raises(InetError):
        xint_dup(worker)


def test_float_dup():
    worker = _worker()
    worker.value_stack.append(1.5)
    xfloat_dup(worker)
    assert worker.value_stack == [1.5, 1.5]


def test_dup_on_empty_stack_raises():
    worker = _worker()
    with pytest.raises(InetError):
        xfloat_dup(worker)


def test_not_applied_through_worker():
    worker = _worker()
    worker.value_stack.append(True)
    worker.apply(worker.mod.find("not"), 1)
    assert worker.value_stack == [False]


def test_link_applied_through_worker():
    worker = _worker()
    worker.apply(worker.mod.find("link"), 0)
    assert len(worker.value_stack) == 2
    assert all(is_wire(value) for value in worker.value_stack)