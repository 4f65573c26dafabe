# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Abstract handler interface and composition helpers."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .events import LogEvent


class LogHandler(ABC):
    """Abstract base class for event handlers.

    A handler consumes every event emitted while it is installed with
    :func:`joblog.interpret`. Filtering, formatting and output are entirely
    the handler's concern; returning from :meth:`handle` resumes the caller.
    """

    @abstractmethod
    def handle(self, event: "LogEvent") -> None:
        """Consume one log event.

        Args:
            event: The emitted event
        """
        pass

    def __call__(self, event: "LogEvent") -> None:
        self.handle(event)

    def close(self) -> None:
        """Release resources owned by the handler."""

    def __enter__(self) -> "LogHandler":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class NullHandler(LogHandler):
    """Handler that discards every event."""

    def handle(self, event: "LogEvent") -> None:
        pass


class FunctionHandler(LogHandler):
    """Adapts a plain ``LogEvent -> None`` callable."""

    def __init__(self, func: Callable[["LogEvent"], Any]):
        self.func = func

    def handle(self, event: "LogEvent") -> None:
        self.func(event)


class CompositeHandler(LogHandler):
    """Delivers each event to several handlers in order.

    A child that raises stops delivery of that event to the children after
    it, and the exception reaches the emitting caller.
    """

    def __init__(self, handlers: list[LogHandler]):
        self.handlers = list(handlers)

    def handle(self, event: "LogEvent") -> None:
        for handler in self.handlers:
            handler.handle(event)

    def close(self) -> None:
        for handler in self.handlers:
            handler.close()


def as_handler(handler: "LogHandler | Callable[[LogEvent], Any]") -> LogHandler:
    """Return ``handler`` as a LogHandler, wrapping plain callables.

    Raises:
        TypeError: If the argument is neither a handler nor callable
    """
    if isinstance(handler, LogHandler):
        return handler
    if callable(handler):
        return FunctionHandler(handler)
    raise TypeError(f"Expected a LogHandler or callable, got {type(handler).__name__}")


def compose(*handlers: "LogHandler | Callable[[LogEvent], Any]") -> LogHandler:
    """Combine handlers so that one emission reaches all of them.

    Example:
        >>> handler = compose(TerminalHandler(Verbosity.NORMAL),
        ...                   FileHandler(Verbosity.VERBOSE, "build.log"))
    """
    children = [as_handler(h) for h in handlers]
    if len(children) == 1:
        return children[0]
    return CompositeHandler(children)
