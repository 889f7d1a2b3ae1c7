"""Build a syntax tree from tokens and check the line's grammar."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .lexer import Token, TokenType
from .syntax_tree import Command, Node, Pipeline, Redirection, RedirType
from .text import ShellError, syntax_error_message

_REDIRECTIONS = {
    TokenType.REDIR_IN: RedirType.IN,
    TokenType.REDIR_OUT: RedirType.OUT,
    TokenType.REDIR_APP: RedirType.APPEND,
    TokenType.HEREDOC: RedirType.HEREDOC,
}


class ParseError(ShellError):
    """Raised on a syntax error; ``token`` is the offending token or None at end of line."""

    def __init__(self, token: Optional[str]) -> None:
        super().__init__(syntax_error_message(token))
        self.token = token


def syntax_check(tokens: Iterable[Token]) -> None:
    """Raise ParseError unless pipes join commands and redirections have targets."""
    items = list(tokens)
    if items and items[0].type is TokenType.PIPE:
        raise ParseError("|")
    followers: List[Optional[Token]] = [*items[1:], None]
    for current, following in zip(items, followers):
        if current.type is TokenType.PIPE:
            if following is None or following.type is TokenType.PIPE:
                raise ParseError("|")
        elif current.type in _REDIRECTIONS:
            if following is None:
                raise ParseError(None)
            if following.type is not TokenType.WORD:
                raise ParseError(following.value)


def _command(tokens: Sequence[Token]) -> Command:
    command = Command()
    stream = iter(tokens)
    for token in stream:
        if token.type in _REDIRECTIONS:
            target = next(stream)
            command.redirs.append(Redirection(_REDIRECTIONS[token.type], target.value))
        else:
            command.argv.append(token.value)
    return command


def _build(tokens: Sequence[Token]) -> Node:
    for index, token in enumerate(tokens):
        if token.type is TokenType.PIPE:
            return Pipeline(_command(tokens[:index]), _build(tokens[index + 1:]))
    return _command(tokens)


def parse_tokens(tokens: Iterable[Token]) -> Node:
    """Check the tokens and return the tree; words keep their quotes."""
    items = list(tokens)
    syntax_check(items)
    return _build(items)