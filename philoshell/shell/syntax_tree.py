"""Syntax tree of a command line: commands joined by pipes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union


class RedirType(enum.Enum):
    IN = "<"
    OUT = ">"
    APPEND = ">>"
    HEREDOC = "<<"


@dataclass
class Redirection:
    """A redirection; ``target`` is a file name or a heredoc delimiter."""

    type: RedirType
    target: str
    body: Optional[str] = None


@dataclass
class Command:
    """A simple command with its arguments and redirections."""

    argv: List[str] = field(default_factory=list)
    redirs: List[Redirection] = field(default_factory=list)


@dataclass
class Pipeline:
    """Two nodes joined by a pipe."""

    left: "Node"
    right: "Node"


Node = Union[Command, Pipeline]


def iter_commands(node: Node) -> Iterator[Command]:
    """Yield the commands of a tree from left to right."""
    if isinstance(node, Pipeline):
        yield from iter_commands(node.left)
        yield from iter_commands(node.right)
    else:
        yield node