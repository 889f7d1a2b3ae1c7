"""Variable expansion and quote removal for words of a parsed line."""

from __future__ import annotations

import re
from typing import Iterator, Tuple

from .environment import Environment
from .syntax_tree import Node, RedirType, iter_commands

# A quoted part may run to the end of the word when its closing quote is missing.
_SEGMENT = re.compile(r"'([^']*)'?|\"([^\"]*)\"?|([^'\"]+)")
_VARIABLE = re.compile(r"\$(\?|[A-Za-z_][A-Za-z0-9_]*)")


def _segments(word: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(quote, text)`` pairs; quote is ``'``, ``"`` or empty for bare text."""
    for match in _SEGMENT.finditer(word):
        single, double, plain = match.groups()
        if single is not None:
            yield "'", single
        elif double is not None:
            yield '"', double
        else:
            yield "", plain


def _expand_variables(text: str, env: Environment, last_status: int) -> str:
    """Replace ``$NAME`` and ``$?`` in ``text``; unset names become empty."""

    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name == "?":
            return str(last_status)
        return env.get(name) or ""

    return _VARIABLE.sub(replace, text)


def expand_word(word: str, env: Environment, last_status: int = 0) -> str:
    """Expand variables outside single quotes and remove the quotes."""
    return "".join(
        text if quote == "'" else _expand_variables(text, env, last_status)
        for quote, text in _segments(word)
    )


def expand_node(node: Node, env: Environment, last_status: int = 0) -> Node:
    """Expand arguments and redirection targets of every command in place.

    Heredoc delimiters are left untouched so that their quotes still decide
    whether the heredoc body is expanded.
    """
    for command in iter_commands(node):
        command.argv = [expand_word(arg, env, last_status) for arg in command.argv]
        for redir in command.redirs:
            if redir.type is not RedirType.HEREDOC:
                redir.target = expand_word(redir.target, env, last_status)
    return node