"""Reading source text into s-expressions, expressions and statements."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Union

from ..value import InetError
from .exp import Ap, Assign, Exp, FloatExp, IntExp, Var
from .stmt import (
    Define,
    DefineFunction,
    DefineNode,
    DefineRule,
    DefineRuleStar,
    Import,
    RunExp,
    Stmt,
)

_SYMBOL = "symbol"
_INT = "int"
_FLOAT = "float"
_STRING = "string"

_TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+|;[^\n]*)
    |(?P<open>[(\[])
    |(?P<close>[)\]])
    |(?P<string>"(?:[^"\\]|\\.)*")
    |(?P<word>[^\s()\[\]";]+)
    |(?P<error>.)
    """,
    re.VERBOSE | re.DOTALL,
)
_INT_RE = re.compile(r"[-+]?\d+")
_FLOAT_RE = re.compile(
    r"[-+]?(?:(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?|\d+[eE][-+]?\d+)"
)
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}
_CLOSERS = {"(": ")", "[": "]"}


class ParseError(InetError):
    """Raised on source text that does not form a valid program."""


@dataclass(frozen=True)
class Atom:
    """A leaf of an s-expression; ``kind`` is symbol, int, float or string."""

    text: str
    kind: str = _SYMBOL


Sexp = Union[Atom, list]


def _word_atom(word: str) -> Atom:
    if _INT_RE.fullmatch(word):
        return Atom(word, _INT)
    if _FLOAT_RE.fullmatch(word):
        return Atom(word, _FLOAT)
    return Atom(word, _SYMBOL)


def _unescape(body: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


def parse_sexps(code: str) -> list[Sexp]:
    """Read every s-expression in ``code``."""
    stack: list[list[Sexp]] = [[]]
    opens: list[str] = []
    for match in _TOKEN_RE.finditer(code):
        kind = match.lastgroup
        text = match.group()
        if kind == "space":
            continue
        if kind == "open":
            stack.append([])
            opens.append(text)
        elif kind == "close":
            if not opens:
                raise ParseError(f"unexpected {text!r} at offset {match.start()}")
            opener = opens.pop()
            if _CLOSERS[opener] != text:
                raise ParseError(
                    f"mismatched {text!r} for {opener!r} at offset {match.start()}"
                )
            items = stack.pop()
            stack[-1].append(items)
        elif kind == "string":
            stack[-1].append(Atom(_unescape(text[1:-1]), _STRING))
        elif kind == "word":
            stack[-1].append(_word_atom(text))
        else:
            raise ParseError(f"unexpected {text!r} at offset {match.start()}")
    if opens:
        raise ParseError(f"unclosed {opens[-1]!r} at end of input")
    return stack[0]


def _format_sexp(sexp: Any) -> str:
    if isinstance(sexp, Atom):
        return sexp.text
    if isinstance(sexp, list):
        return "(" + " ".join(_format_sexp(item) for item in sexp) + ")"
    return repr(sexp)


def _starts_with(sexp: Any, name: str) -> bool:
    return (
        isinstance(sexp, list)
        and bool(sexp)
        and isinstance(sexp[0], Atom)
        and sexp[0].kind != _STRING
        and sexp[0].text == name
    )


def _name(sexp: Any) -> str:
    if not isinstance(sexp, Atom):
        raise ParseError(f"expected a name, got: {_format_sexp(sexp)}")
    return sexp.text


def _as_list(sexp: Any, what: str) -> list:
    if not isinstance(sexp, list):
        raise ParseError(f"expected {what}, got: {_format_sexp(sexp)}")
    return sexp


def _parse_assign(sexp: list) -> Assign:
    rest = sexp[1:]
    if not rest:
        return Assign((), None)
    names = [_name(item) for item in rest[:-1]]
    return Assign(names, parse_exp(rest[-1]))


def parse_exp(sexp: Sexp) -> Exp:
    if _starts_with(sexp, "=") or _starts_with(sexp, "assign"):
        return _parse_assign(sexp)
    if isinstance(sexp, Atom):
        if sexp.kind == _INT:
            return IntExp(int(sexp.text))
        if sexp.kind == _FLOAT:
            return FloatExp(float(sexp.text))
        return Var(sexp.text)
    if isinstance(sexp, list):
        if not sexp:
            raise ParseError("[parse_exp] can not handle empty list sexp")
        target = parse_exp(sexp[0])
        return Ap(target, tuple(parse_exp(arg) for arg in sexp[1:]))
    raise ParseError(f"[parse_exp] not an s-expression: {sexp!r}")


def _parse_exps(sexps: Iterable[Sexp]) -> tuple[Exp, ...]:
    return tuple(parse_exp(sexp) for sexp in sexps)


def _parse_define_node(sexp: list) -> DefineNode:
    if len(sexp) < 2:
        raise ParseError(f"define-node needs a name: {_format_sexp(sexp)}")
    return DefineNode(_name(sexp[1]), [_name(item) for item in sexp[2:]])


def _parse_define(sexp: list) -> Stmt:
    if len(sexp) < 2:
        raise ParseError(f"define needs a name: {_format_sexp(sexp)}")
    head = sexp[1]
    if isinstance(head, Atom):
        if len(sexp) != 3:
            raise ParseError(
                f"define of a value takes one expression: {_format_sexp(sexp)}"
            )
        return Define(head.text, parse_exp(sexp[2]))
    names = _as_list(head, "a name list")
    if not names:
        raise ParseError(f"define of a function needs a name: {_format_sexp(sexp)}")
    return DefineFunction(
        _name(names[0]),
        [_name(item) for item in names[1:]],
        _parse_exps(sexp[2:]),
    )


def _parse_define_rule(sexp: list) -> DefineRule:
    if len(sexp) < 2:
        raise ParseError(f"define-rule needs a pattern: {_format_sexp(sexp)}")
    return DefineRule(parse_exp(sexp[1]), _parse_exps(sexp[2:]))


def _parse_define_rule_star(sexp: list) -> DefineRuleStar:
    if len(sexp) < 2:
        raise ParseError(f"define-rule* needs patterns: {_format_sexp(sexp)}")
    patterns = _as_list(sexp[1], "a pattern list")
    return DefineRuleStar(_parse_exps(patterns), _parse_exps(sexp[2:]))


def _parse_import(sexp: list) -> Import:
    rest = sexp[1:]
    if not rest:
        raise ParseError(f"import needs a path: {_format_sexp(sexp)}")
    names = [_name(item) for item in rest[:-1]]
    return Import(names, _name(rest[-1]))


def parse_stmt(sexp: Sexp) -> Stmt:
    if _starts_with(sexp, "define-node"):
        return _parse_define_node(sexp)
    if _starts_with(sexp, "define-rule"):
        return _parse_define_rule(sexp)
    if _starts_with(sexp, "define-rule*"):
        return _parse_define_rule_star(sexp)
    if _starts_with(sexp, "define"):
        return _parse_define(sexp)
    if _starts_with(sexp, "import"):
        return _parse_import(sexp)
    return RunExp(parse_exp(sexp))


def parse_stmt_list(sexps: Iterable[Sexp]) -> list[Stmt]:
    return [parse_stmt(sexp) for sexp in sexps]