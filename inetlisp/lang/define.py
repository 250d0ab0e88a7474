"""Adding definitions to a module."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from ..core.function import Function
from ..core.mod import Mod
from ..core.primitive import Primitive
from ..core.rule import Rule
from ..net.net_pattern import NetPattern
from ..net.node_ctor import NodeCtor
from ..net.node_pattern import NodePattern
from ..net.port_info import PortInfo
from ..value import InetError, format_value
from .compile import compile_exp_list, compile_set_variable_list
from .exp import Exp


def define(mod: Mod, name: str, value: Any) -> None:
    """Bind ``name`` in ``mod``; a name can be defined only once."""
    if name in mod.values:
        raise InetError(f"[define] name is already defined: {name}")
    mod.values[name] = value


def define_rule(mod: Mod, name: str, rule: Rule) -> None:
    value = mod.find(name)
    if not isinstance(value, NodeCtor):
        raise InetError(
            f"[define_rule] expect {name} to be a node constructor, "
            f"instead of: {format_value(value)}"
        )
    value.rules.append(rule)


def define_rule_star(
    worker: Any, node_patterns: Iterable[NodePattern], exps: Iterable[Exp]
) -> None:
    """Compile a rule body and attach it to every constructor in the pattern."""
    net_pattern = NetPattern(node_patterns)
    function = Function(len(net_pattern.local_names))
    compile_set_variable_list(worker, function, net_pattern.local_names)
    compile_exp_list(worker, function, exps)

    for index, node_pattern in enumerate(net_pattern.node_patterns):
        rule = Rule(index, net_pattern, function)
        define_rule(worker.mod, node_pattern.ctor.name, rule)


def _make_node_ctor(name: str, port_names: Sequence[str]) -> NodeCtor:
    node_ctor = NodeCtor(name, len(port_names))
    node_ctor.port_infos = [PortInfo.from_name(port) for port in port_names]
    return node_ctor


def define_node(worker: Any, name: str, port_names: Sequence[str]) -> None:
    define(worker.mod, name, _make_node_ctor(name, list(port_names)))


def define_primitive_fn(
    mod: Mod,
    name: str,
    input_arity: int,
    output_arity: int,
    fn: Callable[[Any], None],
) -> None:
    define(mod, name, Primitive.from_worker_fn(name, input_arity, output_arity, fn))


def define_primitive_value_fn(
    mod: Mod, name: str, input_arity: int, fn: Callable[..., Any]
) -> None:
    define(mod, name, Primitive.from_value_fn(name, input_arity, fn))


def define_primitive_node(mod: Mod, name: str, port_names: Sequence[str]) -> None:
    """Give the primitive ``name`` a node form, so it can wait on wires."""
    value = mod.find(name)
    if not isinstance(value, Primitive):
        raise InetError(
            f"[define_primitive_node] expect value of name: {name} "
            f"to be a primitive, instead of: {format_value(value)}"
        )
    arity = value.input_arity + value.output_arity
    names = list(port_names)
    if len(names) < arity:
        raise InetError(
            f"[define_primitive_node] {name} needs {arity} port names, "
            f"got {len(names)}"
        )
    node_ctor = _make_node_ctor(name, names[:arity])
    value.node_ctor = node_ctor
    node_ctor.primitive = value


def define_primitive_node_ctor(
    mod: Mod,
    name: str,
    input_arity: int,
    output_arity: int,
    fn: Callable[[Any], None],
    port_names: Sequence[str],
) -> None:
    define_primitive_fn(mod, name, input_arity, output_arity, fn)
    define_primitive_node(mod, name, port_names)


def define_primitive_value_node_ctor(
    mod: Mod,
    name: str,
    input_arity: int,
    fn: Callable[..., Any],
    port_names: Sequence[str],
) -> None:
    define_primitive_value_fn(mod, name, input_arity, fn)
    define_primitive_node(mod, name, port_names)