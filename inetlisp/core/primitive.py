"""Primitives: built-in operations, optionally usable as nodes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

_MAX_VALUE_FN_ARITY = 4


@dataclass(eq=False)
class Primitive:
    """A built-in operation.

    A worker function receives the worker and manages the value stack itself;
    a value function takes ``input_arity`` values and returns one result.
    A primitive with a ``node_ctor`` is generic on wires: applied to wires it
    becomes a node that fires once its principal ports hold values.
    """

    name: str
    input_arity: int
    output_arity: int
    fn: Callable[..., Any]
    takes_worker: bool
    node_ctor: Any = None

    @classmethod
    def from_worker_fn(
        cls,
        name: str,
        input_arity: int,
        output_arity: int,
        fn: Callable[[Any], None],
    ) -> Primitive:
        return cls(name, input_arity, output_arity, fn, takes_worker=True)

    @classmethod
    def from_value_fn(
        cls, name: str, input_arity: int, fn: Callable[..., Any]
    ) -> Primitive:
        if not 0 <= input_arity <= _MAX_VALUE_FN_ARITY:
            raise ValueError(
                f"value primitive {name} takes 0 to {_MAX_VALUE_FN_ARITY} "
                f"inputs, not {input_arity}"
            )
        return cls(name, input_arity, 1, fn, takes_worker=False)

    def __str__(self) -> str:
        return self.name