"""Compiling expressions into function opcodes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..core.function import Function
from ..core.opcode import Apply, GetVariable, Literal, SetVariable
from ..value import InetError, xfloat, xint
from .exp import Ap, Assign, Exp, FloatExp, IntExp, Var


def _compile_set_variable(function: Function, name: str) -> None:
    index = function.local_indexes.setdefault(name, len(function.local_indexes))
    function.add_opcode(SetVariable(index))


def compile_set_variable_list(worker: Any, function: Function, names: Sequence[str]) -> None:
    """Pop stack values into the named locals, the last name first."""
    for name in reversed(list(names)):
        _compile_set_variable(function, name)


def compile_exp_list(worker: Any, function: Function, exps: Iterable[Exp]) -> None:
    for exp in exps:
        compile_exp(worker, function, exp)


def _compile_var(worker: Any, function: Function, name: str) -> None:
    if name in function.local_indexes:
        function.add_opcode(GetVariable(function.local_indexes[name]))
        return
    value = worker.mod.find(name)
    if value is None:
        raise InetError(
            f"[compile_literal] undefined name: {name}, function:\n"
            f"{function.format_with_cursor()}"
        )
    function.add_opcode(Literal(value))


def compile_exp(worker: Any, function: Function, exp: Exp) -> None:
    if isinstance(exp, Var):
        _compile_var(worker, function, exp.name)
    elif isinstance(exp, Ap):
        compile_exp_list(worker, function, exp.args)
        compile_exp(worker, function, exp.target)
        function.add_opcode(Apply(len(exp.args)))
    elif isinstance(exp, Assign):
        if exp.exp is None:
            raise InetError(f"[compile_exp] assignment without expression: {exp}")
        compile_exp(worker, function, exp.exp)
        compile_set_variable_list(worker, function, exp.names)
    elif isinstance(exp, IntExp):
        function.add_opcode(Literal(xint(exp.target)))
    elif isinstance(exp, FloatExp):
        function.add_opcode(Literal(xfloat(exp.target)))
    else:
        raise InetError(f"[compile_exp] unknown expression: {exp!r}")