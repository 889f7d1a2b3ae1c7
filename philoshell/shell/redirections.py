"""Open the files and heredoc bodies named by a command's redirections."""

from __future__ import annotations

import io
import os
from contextlib import ExitStack, contextmanager
from typing import IO, Iterator, Optional, Tuple

from .syntax_tree import Command, Redirection, RedirType
from .text import ShellError, error_message

_FILE_MODE = 0o644
_WRITE_FLAGS = {
    RedirType.OUT: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    RedirType.APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}


class RedirectionError(ShellError):
    """Raised when a redirection target cannot be opened."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(error_message(target, reason))
        self.target = target
        self.reason = reason


def _open(redir: Redirection) -> IO[str]:
    if redir.type is RedirType.IN:
        return open(redir.target, "r", encoding="utf-8")
    fd = os.open(redir.target, _WRITE_FLAGS[redir.type], _FILE_MODE)
    return os.fdopen(fd, "w", encoding="utf-8")


@contextmanager
def open_redirections(
    command: Command, stdin: Optional[IO[str]], stdout: Optional[IO[str]]
) -> Iterator[Tuple[Optional[IO[str]], Optional[IO[str]]]]:
    """Yield the command's input and output streams after its redirections.

    Redirections are applied left to right, so the last one of each direction
    wins. Opened files are closed when the block ends. The first target that
    cannot be opened raises RedirectionError.
    """
    with ExitStack() as stack:
        cmd_in, cmd_out = stdin, stdout
        for redir in command.redirs:
            if redir.type is RedirType.HEREDOC:
                if redir.body is None:
                    raise RedirectionError(redir.target, "heredoc was not read")
                cmd_in = io.StringIO(redir.body)
                continue
            try:
                stream = _open(redir)
            except OSError as exc:
                raise RedirectionError(redir.target, exc.strerror or str(exc)) from exc
            stack.enter_context(stream)
            if redir.type is RedirType.IN:
                cmd_in = stream
            else:
                cmd_out = stream
        yield cmd_in, cmd_out