from __future__ import annotations

from variant_groups.core.model import GroupNode, Node, WordNode


def flatten(node: Node, prefix: str = "") -> list[str]:
    if isinstance(node, WordNode):
        return [prefix + node.value]
    if isinstance(node, GroupNode):
        combined = prefix + node.prefix
        out: list[str] = []
        for child in node.children:
            out.extend(flatten(child, combined))
        return out
    raise TypeError(f"unknown node: {node!r}")  # pragma: no cover
