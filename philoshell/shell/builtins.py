"""Commands run inside the shell itself."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from itertools import takewhile
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from .environment import Environment, is_valid_name
from .text import error_message

_PROGRAM = "minishell"
_NUMERIC = re.compile(r"\s*[+-]?[0-9]+\s*")


@dataclass
class ShellContext:
    """State shared by the shell loop, the executor and the builtins."""

    env: Environment = field(default_factory=Environment)
    last_status: int = 0
    should_exit: bool = False
    interactive: bool = False
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)


def _report(ctx: ShellContext, where: str, message: str) -> None:
    ctx.stderr.write(error_message(f"{_PROGRAM}: {where}", message) + "\n")


def _is_n_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def echo(argv: Sequence[str], ctx: ShellContext) -> int:
    """Print the arguments; leading ``-n`` flags suppress the newline."""
    args = list(argv[1:])
    flags = sum(1 for _ in takewhile(_is_n_flag, args))
    ctx.stdout.write(" ".join(args[flags:]) + ("" if flags else "\n"))
    return 0


def _current_dir() -> Optional[str]:
    try:
        return os.getcwd()
    except OSError:
        return None


def cd(argv: Sequence[str], ctx: ShellContext) -> int:
    """Change directory to the argument or to HOME, updating PWD and OLDPWD."""
    path = argv[1] if len(argv) > 1 else ctx.env.get("HOME")
    if path is None:
        _report(ctx, "cd", "HOME not set")
        return 1
    old = _current_dir() or ctx.env.get("PWD")
    try:
        os.chdir(path)
    except OSError as exc:
        _report(ctx, f"cd: {path}", exc.strerror or str(exc))
        return 1
    if old is not None:
        ctx.env.set("OLDPWD", old)
    new = _current_dir()
    if new is not None:
        ctx.env.set("PWD", new)
    return 0


def pwd(argv: Sequence[str], ctx: ShellContext) -> int:
    """Print the working directory."""
    try:
        ctx.stdout.write(os.getcwd() + "\n")
    except OSError as exc:
        _report(ctx, "pwd", exc.strerror or str(exc))
        return 1
    return 0


def export(argv: Sequence[str], ctx: ShellContext) -> int:
    """Set ``KEY=VALUE`` pairs, or list the variables sorted when given none."""
    args = argv[1:]
    if not args:
        for key in sorted(ctx.env):
            ctx.stdout.write(f'declare -x {key}="{ctx.env.get(key)}"\n')
        return 0
    status = 0
    for arg in args:
        key, sep, value = arg.partition("=")
        if not is_valid_name(key):
            _report(ctx, f"export: `{arg}'", "not a valid identifier")
            status = 1
            continue
        if sep:
            ctx.env.set(key, value, overwrite=True)
    return status


def unset(argv: Sequence[str], ctx: ShellContext) -> int:
    """Remove the named variables; invalid names are reported and skipped."""
    for name in argv[1:]:
        if not is_valid_name(name):
            _report(ctx, f"unset: `{name}'", "not a valid identifier")
            continue
        ctx.env.unset(name)
    return 0


def print_env(argv: Sequence[str], ctx: ShellContext) -> int:
    """Print every variable as ``KEY=VALUE``; arguments are not supported."""
    if len(argv) > 1:
        _report(ctx, "env", "too many arguments")
        return 1
    for entry in ctx.env.to_envp():
        ctx.stdout.write(entry + "\n")
    return 0


def exit_builtin(argv: Sequence[str], ctx: ShellContext) -> int:
    """Ask the shell to exit; return the status it should exit with."""
    if ctx.interactive:
        ctx.stderr.write("exit\n")
    if len(argv) > 1 and not _NUMERIC.fullmatch(argv[1]):
        _report(ctx, f"exit: {argv[1]}", "numeric argument required")
        ctx.should_exit = True
        return 2
    if len(argv) > 2:
        _report(ctx, "exit", "too many arguments")
        ctx.should_exit = False
        return 1
    ctx.should_exit = True
    if len(argv) > 1:
        return int(argv[1]) % 256
    return ctx.last_status


_BUILTINS: Dict[str, Callable[[Sequence[str], ShellContext], int]] = {
    "echo": echo,
    "cd": cd,
    "pwd": pwd,
    "export": export,
    "unset": unset,
    "env": print_env,
    "exit": exit_builtin,
}


def is_builtin(name: str) -> bool:
    """Return True when ``name`` is run by the shell itself."""
    return name in _BUILTINS


def run_builtin(argv: List[str], ctx: ShellContext) -> int:
    """Run the builtin named by ``argv[0]`` and return its status."""
    if not argv or not is_builtin(argv[0]):
        raise ValueError(f"not a builtin: {argv[0] if argv else ''!r}")
    return _BUILTINS[argv[0]](argv, ctx)