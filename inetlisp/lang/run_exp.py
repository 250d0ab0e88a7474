"""Running top-level expressions and printing what they leave on the stack."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from ..core.frame import Frame
from ..core.function import Function
from ..net.wire import is_wire
from ..value import InetError, format_value
from .compile import compile_exp
from .exp import Exp


def _build_net(worker: Any, exp: Exp) -> None:
    function = Function(0)
    compile_exp(worker, function, exp)
    base = len(worker.return_stack)
    worker.return_stack.append(Frame(function))
    worker.run_until(base)


def run_exp(worker: Any, exp: Exp) -> int:
    """Build the net of ``exp``, reduce it, and return how many values it left."""
    base_value_count = len(worker.value_stack)
    _build_net(worker, exp)
    worker.work()
    if len(worker.value_stack) < base_value_count:
        raise InetError(
            "[run_exp] expression consumed values it did not push: "
            f"{exp}"
        )
    return len(worker.value_stack) - base_value_count


def _format_top(worker: Any, value_count: int) -> str:
    parts = []
    for value in worker.value_stack[len(worker.value_stack) - value_count:]:
        if is_wire(value):
            parts.append(value.format_net())
        else:
            parts.append(format_value(value))
        parts.append("\n")
    return "".join(parts)


def run_exp_and_print(worker: Any, exp: Exp, file: TextIO | None = None) -> int:
    """Run ``exp`` and print each value it left, deepest first."""
    value_count = run_exp(worker, exp)
    out = file if file is not None else sys.stdout
    out.write(_format_top(worker, value_count))
    return value_count