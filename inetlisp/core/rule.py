"""Rewrite rules attached to node constructors."""

from __future__ import annotations

from dataclasses import dataclass

from ..net.net_pattern import NetPattern
from .function import Function


@dataclass(eq=False)
class Rule:
    """A net pattern, the pattern index to start matching at, and its body.

    The pattern and function may be shared between several rules.
    """

    starting_index: int
    net_pattern: NetPattern
    function: Function

    def __str__(self) -> str:
        return (
            f'<rule starting-index="{self.starting_index}">\n'
            f"{self.net_pattern}"
            f"{self.function.format_with_cursor()}"
            "</rule>\n"
        )