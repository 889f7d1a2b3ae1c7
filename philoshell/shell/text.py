"""Small string helpers and error message formatting for the shell."""

from __future__ import annotations

from typing import Optional

_BLANKS = frozenset(" \t\n\v\f\r")


class ShellError(Exception):
    """Base class for errors reported by the shell."""


def is_blank(text: Optional[str]) -> bool:
    """Return True when ``text`` is missing or holds only whitespace."""
    if text is None:
        return True
    return all(char in _BLANKS for char in text)


def error_message(where: str, message: str) -> str:
    """Format an error line as ``where: message``."""
    return f"{where}: {message}"


def syntax_error_message(token: Optional[str]) -> str:
    """Format a syntax error about ``token``; a missing token means end of line."""
    shown = "newline" if token is None else token
    return f"syntax error near unexpected token `{shown}'"