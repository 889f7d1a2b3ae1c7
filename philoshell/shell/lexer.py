"""Split a command line into words and operators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .text import ShellError

_BLANKS = frozenset(" \t\n\v\f\r")
_OPERATOR_CHARS = frozenset("|<>")
_QUOTES = frozenset("'\"")


class TokenType(enum.Enum):
    WORD = "word"
    PIPE = "|"
    REDIR_IN = "<"
    REDIR_OUT = ">"
    REDIR_APP = ">>"
    HEREDOC = "<<"


_OPERATORS = {
    ">>": TokenType.REDIR_APP,
    "<<": TokenType.HEREDOC,
    "|": TokenType.PIPE,
    "<": TokenType.REDIR_IN,
    ">": TokenType.REDIR_OUT,
}


@dataclass(frozen=True)
class Token:
    """A lexical unit; words keep their quotes."""

    type: TokenType
    value: str


class LexError(ShellError):
    """Raised when a line cannot be split, such as on an unclosed quote."""


def is_operator_char(char: str) -> bool:
    """Return True for characters that start an operator."""
    return char in _OPERATOR_CHARS


def read_word(line: str, pos: int) -> Tuple[str, int]:
    """Read a raw word starting at ``pos``; return it and the position after it."""
    start = pos
    end = len(line)
    while pos < end and line[pos] not in _BLANKS and not is_operator_char(line[pos]):
        char = line[pos]
        if char in _QUOTES:
            close = line.find(char, pos + 1)
            if close == -1:
                raise LexError(f"unclosed quote {char}")
            pos = close + 1
        else:
            pos += 1
    return line[start:pos], pos


def _tokens(line: str) -> Iterator[Token]:
    pos = 0
    end = len(line)
    while True:
        while pos < end and line[pos] in _BLANKS:
            pos += 1
        if pos >= end:
            return
        pair = line[pos:pos + 2]
        if pair in (">>", "<<"):
            yield Token(_OPERATORS[pair], pair)
            pos += 2
        elif is_operator_char(line[pos]):
            yield Token(_OPERATORS[line[pos]], line[pos])
            pos += 1
        else:
            word, pos = read_word(line, pos)
            yield Token(TokenType.WORD, word)


def lex_line(line: str) -> List[Token]:
    """Turn a raw line into tokens, raising LexError on an unclosed quote."""
    return list(_tokens(line))