# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Forwarding of events to the standard library logging module."""

import logging

from .document import DEFAULT_INDENT
from .events import LogEvent
from .handler import LogHandler
from .levels import Severity, Verbosity

_LEVEL_MAP = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class LoggingBridgeHandler(LogHandler):
    """Handler that re-emits events through a stdlib ``logging.Logger``.

    Lets existing logging configuration, and test harnesses such as
    pytest's ``caplog``, observe events emitted through joblog.
    """

    def __init__(self, name: str = "joblog", verbosity: Verbosity = Verbosity.VERBOSE):
        self.name = name
        self.verbosity = Verbosity.parse(verbosity)
        self._stdlib_logger = logging.getLogger(name)

    def handle(self, event: LogEvent) -> None:
        if not self.verbosity.admits(event.severity):
            return
        self._stdlib_logger.log(
            _LEVEL_MAP[event.severity],
            event.document.plain(indent=DEFAULT_INDENT),
        )
