"""The built-in definitions every module starts with."""

from __future__ import annotations

from typing import Any

from .core.function import Function
from .core.mod import Mod
from .lang.define import (
    define,
    define_primitive_fn,
    define_primitive_node_ctor,
    define_primitive_value_node_ctor,
)
from .net.wire import is_wire, link_wires
from .value import (
    InetError,
    format_value,
    is_xfloat,
    is_xint,
    to_bool,
    xbool,
    xbool_and,
    xbool_not,
    xbool_or,
    xfloat_add,
    xfloat_div,
    xfloat_mod,
    xfloat_mul,
    xfloat_p,
    xfloat_sub,
    xfloat_to_xint,
    xint_add,
    xint_div,
    xint_mod,
    xint_mul,
    xint_p,
    xint_sub,
    xint_to_xfloat,
)


def x_eq(x: Any, y: Any) -> bool:
    """Identity of two values; ints and floats compare by value within a type."""
    if x is y:
        return True
    if type(x) is type(y) and isinstance(x, (int, float)):
        return xbool(x == y)
    return False


def _pop(worker: Any) -> Any:
    if not worker.value_stack:
        raise InetError("value stack is empty")
    return worker.value_stack.pop()


def _top(worker: Any) -> Any:
    if not worker.value_stack:
        raise InetError("value stack is empty")
    return worker.value_stack[-1]


def x_assert(worker: Any) -> None:
    if not to_bool(_pop(worker)):
        raise InetError(f"[assert] fail\n{worker}")


def x_connect(worker: Any) -> None:
    second = _pop(worker)
    first = _pop(worker)
    if is_wire(first):
        worker.connect(first, second)
    elif is_wire(second):
        worker.connect(second, first)
    else:
        raise InetError(
            "[x_connect] can not connect value to value, "
            f"first: {format_value(first)}, second: {format_value(second)}"
        )


def x_link(worker: Any) -> None:
    worker.value_stack.extend(link_wires())


def x_fn_dup(worker: Any) -> None:
    target = _top(worker)
    if not isinstance(target, Function):
        raise InetError(f"[fn-dup] expected a function, got: {format_value(target)}")
    worker.value_stack.append(target)


def xint_dup(worker: Any) -> None:
    target = _top(worker)
    if not is_xint(target):
        raise InetError(f"[int-dup] expected an int, got: {format_value(target)}")
    worker.value_stack.append(target)


def xfloat_dup(worker: Any) -> None:
    target = _top(worker)
    if not is_xfloat(target):
        raise InetError(f"[float-dup] expected a float, got: {format_value(target)}")
    worker.value_stack.append(target)


_UNARY = ("x!", "result")
_BINARY = ("x!", "y!", "result")
_DUP = ("target!", "first", "second")


def import_prelude(mod: Mod) -> None:
    """Define the built-in values and primitives in ``mod``."""
    # bool
    define(mod, "false", False)
    define(mod, "true", True)
    define_primitive_value_node_ctor(mod, "not", 1, xbool_not, _UNARY)
    define_primitive_value_node_ctor(mod, "and", 2, xbool_and, _BINARY)
    define_primitive_value_node_ctor(mod, "or", 2, xbool_or, _BINARY)

    # value
    define_primitive_value_node_ctor(mod, "eq?", 2, x_eq, _BINARY)

    # testing
    define_primitive_fn(mod, "assert", 1, 0, x_assert)

    # int
    define_primitive_value_node_ctor(mod, "int?", 1, xint_p, _UNARY)
    define_primitive_value_node_ctor(mod, "iadd", 2, xint_add, _BINARY)
    define_primitive_value_node_ctor(mod, "isub", 2, xint_sub, _BINARY)
    define_primitive_value_node_ctor(mod, "imul", 2, xint_mul, _BINARY)
    define_primitive_value_node_ctor(mod, "idiv", 2, xint_div, _BINARY)
    define_primitive_value_node_ctor(mod, "imod", 2, xint_mod, _BINARY)
    define_primitive_value_node_ctor(mod, "int-to-float", 1, xint_to_xfloat, ("i!", "f"))
    define_primitive_node_ctor(mod, "int-dup", 1, 2, xint_dup, _DUP)

    # float
    define_primitive_value_node_ctor(mod, "float?", 1, xfloat_p, _UNARY)
    define_primitive_value_node_ctor(mod, "fadd", 2, xfloat_add, _BINARY)
    define_primitive_value_node_ctor(mod, "fsub", 2, xfloat_sub, _BINARY)
    define_primitive_value_node_ctor(mod, "fmul", 2, xfloat_mul, _BINARY)
    define_primitive_value_node_ctor(mod, "fdiv", 2, xfloat_div, _BINARY)
    define_primitive_value_node_ctor(mod, "fmod", 2, xfloat_mod, _BINARY)
    define_primitive_value_node_ctor(mod, "float-to-int", 1, xfloat_to_xint, ("f!", "i"))
    define_primitive_node_ctor(mod, "float-dup", 1, 2, xfloat_dup, _DUP)

    # net
    define_primitive_fn(mod, "connect", 2, 0, x_connect)
    define_primitive_fn(mod, "link", 0, 2, x_link)

    # function
    define_primitive_node_ctor(mod, "fn-dup", 1, 2, x_fn_dup, _DUP)