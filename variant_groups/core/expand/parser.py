from __future__ import annotations

from typing import Optional

from variant_groups.core.errors import UnbalancedGroupingError
from variant_groups.core.model import (
    GroupClose,
    GroupNode,
    GroupOpen,
    Separator,
    Token,
    Word,
    WordNode,
)


def parse(tokens: list[Token]) -> GroupNode:
    """Build the group tree for a token list.

    Returns a synthetic root group with an empty prefix. A word is a group
    prefix only when the very next token is ``(``; otherwise it is a plain
    word, whatever its text.

    Raises UnbalancedGroupingError on a stray ``)``, on a ``(`` that does not
    directly follow a word, and on groups left open at the end.
    """

    root = GroupNode(prefix="")
    stack: list[GroupNode] = [root]
    prev: Optional[Token] = None

    for i, token in enumerate(tokens):
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None

        if isinstance(token, Word):
            if isinstance(nxt, GroupOpen):
                stack.append(GroupNode(prefix=token.text))
            else:
                stack[-1].children.append(WordNode(token.text))
        elif isinstance(token, GroupOpen):
            # The preceding word already pushed the group.
            if not isinstance(prev, Word):
                raise UnbalancedGroupingError(
                    code="E_UNBALANCED_GROUPING",
                    message="'(' must directly follow a prefix",
                    path=f"tokens[{i}]",
                )
        elif isinstance(token, GroupClose):
            if len(stack) == 1:
                raise UnbalancedGroupingError(
                    code="E_UNBALANCED_GROUPING",
                    message="')' has no matching '('",
                    path=f"tokens[{i}]",
                )
            finished = stack.pop()
            stack[-1].children.append(finished)
        elif isinstance(token, Separator):
            pass
        else:  # pragma: no cover
            raise TypeError(f"unknown token: {token!r}")

        prev = token

    if len(stack) > 1:
        unclosed = ", ".join(repr(g.prefix) for g in stack[1:])
        raise UnbalancedGroupingError(
            code="E_UNBALANCED_GROUPING",
            message=f"{len(stack) - 1} group(s) left open: {unclosed}",
            path="end",
        )

    return root
