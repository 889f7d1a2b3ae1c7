"""Run a syntax tree: commands, pipelines and their redirections."""

from __future__ import annotations

import dataclasses
import io
from typing import IO, Optional

from .builtins import ShellContext, is_builtin, run_builtin
from .environment import Environment
from .redirections import RedirectionError, open_redirections
from .syntax_tree import Command, Node, Pipeline
from .text import error_message

NOT_FOUND_STATUS = 127
_PROGRAM = "minishell"


def _report(ctx: ShellContext, message: str) -> None:
    ctx.stderr.write(error_message(_PROGRAM, message) + "\n")


def _subshell(ctx: ShellContext) -> ShellContext:
    """A copy of the context whose changes do not reach the caller."""
    env = Environment((key, ctx.env.get(key) or "") for key in ctx.env)
    return dataclasses.replace(ctx, env=env, should_exit=False)


def execute_command(
    command: Command,
    ctx: ShellContext,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> int:
    """Run one command with its redirections and return its status."""
    out = ctx.stdout if stdout is None else stdout
    try:
        with open_redirections(command, stdin, out) as (_, cmd_out):
            if not command.argv:
                return 0
            name = command.argv[0]
            if not is_builtin(name):
                _report(ctx, error_message(name, "command not found"))
                return NOT_FOUND_STATUS
            saved = ctx.stdout
            ctx.stdout = cmd_out if cmd_out is not None else saved
            try:
                return run_builtin(command.argv, ctx)
            finally:
                ctx.stdout = saved
    except RedirectionError as exc:
        _report(ctx, str(exc))
        return 1


def execute(
    node: Node,
    ctx: ShellContext,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> int:
    """Run a tree and return the status of its last command.

    Both sides of a pipeline run in copies of the context, so builtins such as
    ``cd``, ``export`` or ``exit`` only affect the shell when run alone.
    """
    if isinstance(node, Pipeline):
        pipe = io.StringIO()
        execute(node.left, _subshell(ctx), stdin, pipe)
        pipe.seek(0)
        return execute(node.right, _subshell(ctx), pipe, stdout)
    return execute_command(node, ctx, stdin, stdout)