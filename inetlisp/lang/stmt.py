"""Top-level statements of the language."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from .exp import Exp, format_exp_list, format_name_list


def _freeze(instance: object, *fields: str) -> None:
    for field in fields:
        object.__setattr__(instance, field, tuple(getattr(instance, field)))


def _format_tail(exps: Sequence[Exp]) -> str:
    if not exps:
        return ")"
    return f" {format_exp_list(exps)})"


@dataclass(frozen=True)
class Define:
    """``(define name exp)``: bind the value of ``exp`` to a name."""

    name: str
    exp: Exp

    def __str__(self) -> str:
        return f"(define {self.name} {self.exp})"


@dataclass(frozen=True)
class DefineFunction:
    """``(define (name arg ...) exp ...)``."""

    name: str
    arg_names: tuple[str, ...]
    exps: tuple[Exp, ...]

    def __post_init__(self) -> None:
        _freeze(self, "arg_names", "exps")

    def __str__(self) -> str:
        if self.arg_names:
            head = f"(define ({self.name} {format_name_list(self.arg_names)})"
        else:
            head = f"(define ({self.name})"
        return head + _format_tail(self.exps)


@dataclass(frozen=True)
class DefineNode:
    """``(define-node name port ...)``."""

    name: str
    port_names: tuple[str, ...]

    def __post_init__(self) -> None:
        _freeze(self, "port_names")

    def __str__(self) -> str:
        return f"(define-node {self.name} {format_name_list(self.port_names)})"


@dataclass(frozen=True)
class DefineRule:
    """``(define-rule pattern exp ...)`` with a tree-shaped pattern."""

    pattern_exp: Exp
    exps: tuple[Exp, ...]

    def __post_init__(self) -> None:
        _freeze(self, "exps")

    def __str__(self) -> str:
        return f"(define-rule {self.pattern_exp}" + _format_tail(self.exps)


@dataclass(frozen=True)
class DefineRuleStar:
    """``(define-rule* (pattern ...) exp ...)`` with a list of node patterns."""

    pattern_exps: tuple[Exp, ...]
    exps: tuple[Exp, ...]

    def __post_init__(self) -> None:
        _freeze(self, "pattern_exps", "exps")

    def __str__(self) -> str:
        patterns = f"({format_exp_list(self.pattern_exps)})"
        return f"(define-rule* {patterns}" + _format_tail(self.exps)


@dataclass(frozen=True)
class RunExp:
    """An expression evaluated at top level, its results printed."""

    exp: Exp

    def __str__(self) -> str:
        return str(self.exp)


@dataclass(frozen=True)
class Import:
    """``(import name ... "path")``."""

    names: tuple[str, ...]
    path: str

    def __post_init__(self) -> None:
        _freeze(self, "names")

    def __str__(self) -> str:
        return f'(import {format_name_list(self.names)} "{self.path}")'


Stmt = Union[Define, DefineFunction, DefineNode, DefineRule, DefineRuleStar, RunExp, Import]