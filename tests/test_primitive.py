import pytest

from inetlisp.core.primitive import Primitive
from inetlisp.value import format_value, xint_add


def test_value_fn_has_one_output():
    primitive = Primitive.from_value_fn("iadd", 2, xint_add)
    assert primitive.input_arity == 2
    assert primitive.output_arity == 1
    assert not primitive.takes_worker
    assert primitive.node_ctor is None
    assert primitive.fn(1, 2) == 3


def test_worker_fn_keeps_arities():
    def link(worker):
        worker.append("linked")

    primitive = Primitive.from_worker_fn("link", 0, 2, link)
    assert primitive.takes_worker
    assert (primitive.input_arity, primitive.output_arity) == (0, 2)
    calls = []
    primitive.fn(calls)
    assert calls == ["linked"]


@pytest.mark.parametrize("arity", [-1, 5])
def test_value_fn_arity_is_limited(arity):
    with pytest.raises(ValueError):
        Primitive.from_value_fn("bad", arity, lambda *args: None)


def test_prints_its_name():
    primitive = Primitive.from_value_fn("not", 1, lambda x: not x)
    assert str(primitive) == "not"
    assert format_value(primitive) == "not"