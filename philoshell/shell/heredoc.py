"""Read heredoc bodies before a line is executed."""

from __future__ import annotations

from typing import Callable, Optional

from .environment import Environment
from .expander import _expand_variables, _segments
from .signals import INTERRUPTED_STATUS
from .syntax_tree import Node, RedirType, iter_commands
from .text import ShellError

PROMPT = "> "

ReadLine = Callable[[str], Optional[str]]


class HeredocInterrupted(ShellError):
    """Raised when reading a heredoc is cancelled by an interrupt."""

    status = INTERRUPTED_STATUS


def read_heredoc(
    delimiter: str, read_line: ReadLine, env: Environment, last_status: int = 0
) -> str:
    """Read lines until the delimiter or end of input and return the body.

    ``read_line`` is called with the prompt and returns a line, or None at end
    of input. Variables in the body are expanded unless the delimiter is quoted.
    """
    quoted = any(char in "'\"" for char in delimiter)
    end = "".join(text for _, text in _segments(delimiter))
    lines = []
    try:
        while True:
            line = read_line(PROMPT)
            if line is None:
                break
            line = line.removesuffix("\n")
            if line == end:
                break
            lines.append(line if quoted else _expand_variables(line, env, last_status))
    except KeyboardInterrupt as exc:
        raise HeredocInterrupted("heredoc interrupted") from exc
    return "".join(f"{line}\n" for line in lines)


def prepare_heredocs(
    node: Node, read_line: ReadLine, env: Environment, last_status: int = 0
) -> None:
    """Read the body of every heredoc in the tree, left to right."""
    for command in iter_commands(node):
        for redir in command.redirs:
            if redir.type is RedirType.HEREDOC:
                redir.body = read_heredoc(redir.target, read_line, env, last_status)