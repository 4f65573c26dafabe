# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""joblog: pluggable, severity-tagged logging for job workers.

Call sites emit events; the handler installed around them decides where
the events go. Emitting never performs I/O by itself.

Example:
    >>> from joblog import FileHandler, TerminalHandler, Verbosity, compose, interpret
    >>> from joblog import Document, PackageName, info, render, warn
    >>>
    >>> def build() -> None:
    ...     info(Document.text("building ") + render(PackageName("text-utils")))
    ...     warn("disk low")
    >>>
    >>> handler = compose(
    ...     TerminalHandler(Verbosity.NORMAL),
    ...     FileHandler(Verbosity.VERBOSE, "build.log"),
    ... )
    >>> interpret(handler, build)
"""

__version__ = "0.1.0"

from .bridge import LoggingBridgeHandler
from .config import HandlerConfig
from .database_handler import DatabaseHandler
from .document import Document, Span, concat
from .events import (
    LogEvent,
    current_handler,
    debug,
    emit,
    error,
    info,
    interpret,
    interpreting,
    warn,
)
from .factory import create_handler, create_handlers, create_terminal_handler
from .file_handler import FileHandler
from .handler import CompositeHandler, FunctionHandler, LogHandler, NullHandler, compose
from .levels import Severity, Verbosity
from .memory_handler import MemoryHandler
from .models import LogRow, PackageName, Version, VersionRange
from .renderable import Renderable, render
from .terminal_handler import TerminalHandler

__all__ = [
    "__version__",
    # Levels
    "Severity",
    "Verbosity",
    # Documents
    "Document",
    "Span",
    "concat",
    "Renderable",
    "render",
    # Domain values
    "LogRow",
    "PackageName",
    "Version",
    "VersionRange",
    # Emission
    "LogEvent",
    "current_handler",
    "emit",
    "debug",
    "info",
    "warn",
    "error",
    "interpret",
    "interpreting",
    # Handlers
    "LogHandler",
    "NullHandler",
    "FunctionHandler",
    "CompositeHandler",
    "compose",
    "TerminalHandler",
    "FileHandler",
    "DatabaseHandler",
    "MemoryHandler",
    "LoggingBridgeHandler",
    # Configuration
    "HandlerConfig",
    "create_handler",
    "create_handlers",
    "create_terminal_handler",
]
