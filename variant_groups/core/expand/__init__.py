"""Grouped-variant expansion engine.

``hover:(bg-red-500 md:(pl-3 pt-2))`` becomes
``hover:bg-red-500 hover:md:pl-3 hover:md:pt-2``. Prefixes are raw string
fragments: they are concatenated as written, so the ``:`` belongs to the
prefix word.
"""
from __future__ import annotations

from variant_groups.core.expand.flattener import flatten
from variant_groups.core.expand.parser import parse
from variant_groups.core.expand.tokenizer import tokenize


def expand(text: str) -> str:
    return " ".join(flatten(parse(tokenize(text))))


__all__ = ["expand", "flatten", "parse", "tokenize"]
