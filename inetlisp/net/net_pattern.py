"""Net patterns: groups of node patterns joined by principal names."""

from __future__ import annotations

from collections.abc import Iterable

from .node_pattern import NodePattern


class NetPattern:
    """Node patterns matched together, with the local names they bind."""

    def __init__(self, node_patterns: Iterable[NodePattern]) -> None:
        self.node_patterns: list[NodePattern] = list(node_patterns)
        names: dict[str, None] = {}
        for node_pattern in self.node_patterns:
            for port_info in node_pattern.port_infos:
                if port_info is not None and not port_info.is_principal:
                    names.setdefault(port_info.name, None)
        self.local_names: list[str] = list(names)

    def __len__(self) -> int:
        return len(self.node_patterns)

    def __getitem__(self, index: int) -> NodePattern:
        return self.node_patterns[index]

    def __str__(self) -> str:
        patterns = "".join(f"{pattern}\n" for pattern in self.node_patterns)
        return (
            "<net-pattern>\n"
            "<node-pattern-list>\n"
            f"{patterns}"
            "</node-pattern-list>\n"
            f"<local-name-array>{', '.join(self.local_names)}</local-name-array>\n"
            "</net-pattern>\n"
        )