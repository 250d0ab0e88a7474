"""Expressions of the language."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from ..value import format_value, xfloat, xint


def format_exp_list(exps: Iterable[Exp]) -> str:
    return " ".join(str(exp) for exp in exps)


def format_name_list(names: Iterable[str]) -> str:
    return " ".join(names)


@dataclass(frozen=True)
class Var:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Ap:
    target: Exp
    args: tuple[Exp, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        if not self.args:
            return f"({self.target})"
        return f"({self.target} {format_exp_list(self.args)})"


@dataclass(frozen=True)
class Assign:
    """``(= name ... exp)``: bind the values of ``exp`` to names."""

    names: tuple[str, ...]
    exp: Exp | None

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))

    def __str__(self) -> str:
        if not self.names:
            return "(=)"
        return f"(= {format_name_list(self.names)})"


@dataclass(frozen=True)
class IntExp:
    target: int

    def __str__(self) -> str:
        return format_value(xint(self.target))


@dataclass(frozen=True)
class FloatExp:
    target: float

    def __str__(self) -> str:
        return format_value(xfloat(self.target))


Exp = Union[Var, Ap, Assign, IntExp, FloatExp]