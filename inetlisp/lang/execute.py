"""Loading source files and executing their statements."""

from __future__ import annotations

import os
import sys
from typing import Any, TextIO

from ..core.function import Function
from ..core.mod import Mod
from ..core.worker import Worker
from ..net.node_ctor import NodeCtor
from ..net.node_pattern import NodePattern
from ..net.port_info import PortInfo
from ..value import InetError
from .compile import compile_exp_list, compile_set_variable_list
from .define import define, define_node, define_rule_star
from .exp import Ap, Exp, Var
from .parse import parse_sexps, parse_stmt_list
from .run_exp import run_exp, run_exp_and_print
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


def _expect_ap(exp: Exp) -> Ap:
    if not isinstance(exp, Ap):
        raise InetError(f"[pattern] expected a node pattern, got: {exp}")
    return exp


def _build_node_pattern(worker: Any, exp: Exp) -> NodePattern:
    ap = _expect_ap(exp)
    if not isinstance(ap.target, Var):
        raise InetError(f"[build_node_pattern] expected a node name: {ap}")
    name = ap.target.name
    value = worker.mod.find(name)
    if value is None:
        raise InetError(f"[build_node_pattern] undefined node: {name}")
    if not isinstance(value, NodeCtor):
        raise InetError(f"[build_node_pattern] not a node: {name}")
    if len(ap.args) != value.arity:
        raise InetError(
            f"[build_node_pattern] node {name} has {value.arity} ports, "
            f"pattern gives {len(ap.args)}: {ap}"
        )

    node_pattern = NodePattern(value)
    for index, arg in enumerate(ap.args):
        if not isinstance(arg, Var):
            raise InetError(f"[build_node_pattern] expected a port name: {arg}")
        if not node_pattern.set_port_info(index, PortInfo.from_name(arg.name)):
            raise InetError(
                f"[build_node_pattern] principal mark of {arg.name} "
                f"disagrees with node {name}"
            )
    return node_pattern


def _build_node_patterns(worker: Any, exps: list[Exp]) -> list[NodePattern]:
    return [_build_node_pattern(worker, exp) for exp in exps]


def _translate_args(worker: Any, args: tuple[Exp, ...], out: list[Exp]) -> list[Exp]:
    new_args: list[Exp] = []
    for arg in args:
        if isinstance(arg, Var):
            new_args.append(arg)
        else:
            name = worker.fresh_name() + "!"
            _translate_sub_tree(worker, arg, name, out)
            new_args.append(Var(name))
    return new_args


def _translate_sub_tree(worker: Any, exp: Exp, last_arg_name: str, out: list[Exp]) -> None:
    ap = _expect_ap(exp)
    args = _translate_args(worker, ap.args, out)
    args.append(Var(last_arg_name))
    out.insert(0, Ap(ap.target, tuple(args)))


def _translate_pattern_tree(worker: Any, exp: Exp) -> list[Exp]:
    """Flatten a nested pattern into node patterns joined by fresh principal names."""
    ap = _expect_ap(exp)
    out: list[Exp] = []
    args = _translate_args(worker, ap.args, out)
    out.insert(0, Ap(ap.target, tuple(args)))
    return out


class Loader:
    """Loads source files into modules, each file once."""

    def __init__(self, track_nodes: bool = False, output: TextIO | None = None) -> None:
        self.track_nodes = track_nodes
        self.output = output
        self.mods: dict[str, Mod] = {}

    def load(self, path: str | os.PathLike[str]) -> Mod:
        key = os.path.abspath(os.fspath(path))
        found = self.mods.get(key)
        if found is not None:
            return found

        with open(key, encoding="utf-8") as file:
            code = file.read()

        from ..prelude import import_prelude

        mod = Mod(key, code)
        import_prelude(mod)
        worker = Worker(mod, self.track_nodes)
        for stmt in parse_stmt_list(parse_sexps(code)):
            self.execute(worker, stmt)

        mod.loader_worker = worker
        self.mods[key] = mod
        return mod

    def execute(self, worker: Any, stmt: Stmt) -> None:
        if isinstance(stmt, Define):
            base = len(worker.value_stack)
            run_exp(worker, stmt.exp)
            if len(worker.value_stack) <= base:
                raise InetError(f"[define] expression gives no value: {stmt}")
            define(worker.mod, stmt.name, worker.value_stack.pop())
        elif isinstance(stmt, DefineFunction):
            function = Function(len(stmt.arg_names), stmt.name)
            compile_set_variable_list(worker, function, stmt.arg_names)
            compile_exp_list(worker, function, stmt.exps)
            define(worker.mod, stmt.name, function)
        elif isinstance(stmt, DefineNode):
            define_node(worker, stmt.name, stmt.port_names)
        elif isinstance(stmt, DefineRule):
            pattern_exps = _translate_pattern_tree(worker, stmt.pattern_exp)
            define_rule_star(worker, _build_node_patterns(worker, pattern_exps), stmt.exps)
        elif isinstance(stmt, DefineRuleStar):
            define_rule_star(
                worker, _build_node_patterns(worker, list(stmt.pattern_exps)), stmt.exps
            )
        elif isinstance(stmt, RunExp):
            output = self.output if self.output is not None else sys.stdout
            run_exp_and_print(worker, stmt.exp, output)
        elif isinstance(stmt, Import):
            base_dir = os.path.dirname(os.fspath(worker.mod.path))
            path = os.path.normpath(os.path.join(base_dir, stmt.path))
            imported = self.load(path)
            for name in stmt.names:
                value = imported.find(name)
                if value is None:
                    raise InetError(f"[execute / import] unknown name: {name} {stmt}")
                define(worker.mod, name, value)
        else:
            raise InetError(f"[execute] unknown statement: {stmt!r}")