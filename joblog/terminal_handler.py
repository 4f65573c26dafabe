# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Terminal handler writing colour-coded lines to stdout."""

import sys
from typing import TextIO

from .config import HandlerConfig
from .document import DEFAULT_INDENT, Document
from .events import LogEvent
from .handler import LogHandler
from .levels import Severity, Verbosity

DEBUG_COLOR = "blue"
WARNING_COLOR = "yellow"
ERROR_COLOR = "red"


def style_event(event: LogEvent) -> Document:
    """Apply the terminal colour scheme to an event's document."""
    if event.severity == Severity.DEBUG:
        return event.document.colored(DEBUG_COLOR)
    if event.severity == Severity.WARN:
        return Document.text("[WARNING] ", WARNING_COLOR) + event.document
    if event.severity == Severity.ERROR:
        return Document.text("[ERROR] ", ERROR_COLOR) + event.document
    return event.document


class TerminalHandler(LogHandler):
    """Handler that prints ANSI-coloured lines to the console."""

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL, stream: TextIO | None = None):
        """Initialize terminal handler.

        Args:
            verbosity: Which severities are printed
            stream: Output stream (default: sys.stdout at construction time)
        """
        self.verbosity = Verbosity.parse(verbosity)
        self.stream = stream if stream is not None else sys.stdout

    @classmethod
    def from_config(cls, config: HandlerConfig) -> "TerminalHandler":
        """Create a TerminalHandler from handler configuration."""
        return cls(verbosity=config.verbosity)

    def handle(self, event: LogEvent) -> None:
        if not self.verbosity.admits(event.severity):
            return
        line = style_event(event).ansi(indent=DEFAULT_INDENT)
        self.stream.write(line + "\n")
        self.stream.flush()
