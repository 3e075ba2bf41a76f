from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


# Tokens


@dataclass(frozen=True)
class Word:
    text: str


@dataclass(frozen=True)
class GroupOpen:
    pass


@dataclass(frozen=True)
class GroupClose:
    pass


@dataclass(frozen=True)
class Separator:
    pass


Token = Union[Word, GroupOpen, GroupClose, Separator]


# AST


@dataclass(frozen=True)
class WordNode:
    value: str


@dataclass
class GroupNode:
    prefix: str
    children: list[Node] = field(default_factory=list)


Node = Union[WordNode, GroupNode]
