"""The interactive loop: read, parse, expand and run each line."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, Optional, Sequence

from .builtins import ShellContext
from .environment import Environment
from .executor import execute
from .expander import expand_node
from .heredoc import HeredocInterrupted, prepare_heredocs
from .lexer import LexError, lex_line
from .parser import ParseError, parse_tokens
from .signals import INTERRUPTED_STATUS, setup_prompt_signals
from .text import error_message, is_blank

PROMPT = "minishell$ "
SYNTAX_STATUS = 2

ReadLine = Callable[[str], Optional[str]]


def _no_input(prompt: str) -> Optional[str]:
    return None


def _finish(ctx: ShellContext, status: int) -> int:
    ctx.last_status = status
    return status


def run_line(line: str, ctx: ShellContext, read_line: ReadLine = _no_input) -> int:
    """Run one line and return its status, which also becomes ``$?``.

    ``read_line`` supplies heredoc lines. A blank line leaves the status as it is.
    """
    if is_blank(line):
        return ctx.last_status
    try:
        tree = parse_tokens(lex_line(line))
    except (LexError, ParseError) as exc:
        ctx.stderr.write(error_message("minishell", str(exc)) + "\n")
        return _finish(ctx, SYNTAX_STATUS)
    try:
        prepare_heredocs(tree, read_line, ctx.env, ctx.last_status)
    except HeredocInterrupted as exc:
        return _finish(ctx, exc.status)
    expand_node(tree, ctx.env, ctx.last_status)
    return _finish(ctx, execute(tree, ctx))


def run_loop(ctx: ShellContext, read_line: ReadLine) -> int:
    """Read and run lines until end of input or ``exit``; return the last status."""
    while not ctx.should_exit:
        try:
            line = read_line(PROMPT)
        except KeyboardInterrupt:
            ctx.stdout.write("\n")
            ctx.last_status = INTERRUPTED_STATUS
            continue
        if line is None:
            if ctx.interactive:
                ctx.stdout.write("exit\n")
            break
        try:
            run_line(line, ctx, read_line)
        except KeyboardInterrupt:
            ctx.stdout.write("\n")
            ctx.last_status = INTERRUPTED_STATUS
    return ctx.last_status


def _bump_shell_level(env: Environment) -> None:
    try:
        level = int(env.get("SHLVL") or "0")
    except ValueError:
        level = 0
    env.set("SHLVL", str(level + 1))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the status of the last command."""
    env = Environment.from_mapping(os.environ)
    _bump_shell_level(env)
    interactive = sys.stdin.isatty()
    ctx = ShellContext(env=env, interactive=interactive)
    if interactive:
        try:
            import readline  # noqa: F401  (enables line editing and history)
        except ImportError:
            pass

    def read_line(prompt: str) -> Optional[str]:
        try:
            return input(prompt if interactive else "")
        except EOFError:
            return None

    previous = setup_prompt_signals()
    try:
        status = run_loop(ctx, read_line)
    finally:
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)
        ctx.stdout.flush()
    return status


if __name__ == "__main__":
    sys.exit(main())