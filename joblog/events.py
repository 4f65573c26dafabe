# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Log events and the emission entry points.

Emitting only hands an event to the handler installed for the current
context; it never touches a file, a console or a store itself. With no
handler installed the event is dropped.

Example:
    >>> from joblog import TerminalHandler, Verbosity, interpret, info
    >>> def build() -> int:
    ...     info("build ok")
    ...     return 0
    >>> interpret(TerminalHandler(Verbosity.NORMAL), build)
    build ok
    0
"""

import inspect
from collections.abc import Callable, Coroutine, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, TypeVar

from .document import Document
from .handler import LogHandler, NullHandler, as_handler
from .levels import Severity
from .renderable import render

T = TypeVar("T")

_NULL_HANDLER = NullHandler()
_active_handler: ContextVar[LogHandler] = ContextVar("joblog_handler", default=_NULL_HANDLER)


@dataclass(frozen=True)
class LogEvent:
    """A severity-tagged, already rendered message."""

    severity: Severity
    document: Document


def current_handler() -> LogHandler:
    """Return the handler installed for the current context."""
    return _active_handler.get()


def emit(severity: Severity, value: object) -> None:
    """Render ``value`` and deliver it at ``severity`` to the active handler."""
    event = LogEvent(severity=Severity.parse(severity), document=render(value))
    _active_handler.get().handle(event)


def debug(value: object) -> None:
    emit(Severity.DEBUG, value)


def info(value: object) -> None:
    emit(Severity.INFO, value)


def warn(value: object) -> None:
    emit(Severity.WARN, value)


def error(value: object) -> None:
    emit(Severity.ERROR, value)


@contextmanager
def interpreting(handler: LogHandler | Callable[[LogEvent], Any]) -> Iterator[LogHandler]:
    """Install ``handler`` for the body of a ``with`` block.

    The previous handler is restored on exit, including when the body raises.
    """
    installed = as_handler(handler)
    token = _active_handler.set(installed)
    try:
        yield installed
    finally:
        _active_handler.reset(token)


def interpret(
    handler: LogHandler | Callable[[LogEvent], Any],
    program: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> T:
    """Run ``program`` routing every event it emits through ``handler``.

    Args:
        handler: LogHandler or plain callable receiving each LogEvent
        program: Callable to run
        *args: Positional arguments for ``program``
        **kwargs: Keyword arguments for ``program``

    Returns:
        Whatever ``program`` returns. If ``program`` is a coroutine
        function, a coroutine that runs it with ``handler`` installed.
    """
    installed = as_handler(handler)
    with interpreting(installed):
        result = program(*args, **kwargs)
    if inspect.iscoroutine(result):
        return _interpret_coroutine(installed, result)
    return result


async def _interpret_coroutine(handler: LogHandler, coro: Coroutine[Any, Any, T]) -> T:
    with interpreting(handler):
        return await coro
