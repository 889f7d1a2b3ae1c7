"""Signal dispositions for the prompt, for running commands and for heredocs."""

from __future__ import annotations

import signal
from typing import Any, Dict

INTERRUPTED_STATUS = 130

_SIGQUIT = getattr(signal, "SIGQUIT", None)


def _install(handlers: Dict[int, Any]) -> Dict[int, Any]:
    return {signum: signal.signal(signum, handler) for signum, handler in handlers.items()}


def setup_prompt_signals() -> Dict[int, Any]:
    """Interrupt the current line on SIGINT and ignore SIGQUIT.

    Returns the handlers that were replaced.
    """
    handlers: Dict[int, Any] = {signal.SIGINT: signal.default_int_handler}
    if _SIGQUIT is not None:
        handlers[_SIGQUIT] = signal.SIG_IGN
    return _install(handlers)


def setup_exec_signals() -> Dict[int, Any]:
    """Restore default dispositions while a command runs.

    Returns the handlers that were replaced.
    """
    handlers: Dict[int, Any] = {signal.SIGINT: signal.default_int_handler}
    if _SIGQUIT is not None:
        handlers[_SIGQUIT] = signal.SIG_DFL
    return _install(handlers)


def setup_heredoc_signals() -> Dict[int, Any]:
    """Make SIGINT abort the heredoc being read.

    Returns the handlers that were replaced.
    """
    return _install({signal.SIGINT: signal.default_int_handler})