# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""File handler appending timestamped plain-text lines to a log file."""

import sys
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from .config import HandlerConfig
from .document import DEFAULT_INDENT
from .events import LogEvent
from .handler import LogHandler
from .levels import Verbosity


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with a ``Z`` suffix.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class FileHandler(LogHandler):
    """Handler that appends one line per event to a UTF-8 text file.

    Lines look like ``[2025-01-01T12:00:00.000000Z INFO] build ok``.

    A failed write never reaches the caller: a single diagnostic naming the
    path and the error is printed to stderr and the line is dropped. The file
    is opened in append mode for each line and closed right after, so no
    handle is held between events and concurrent writers rely on the
    operating system's append semantics.
    """

    def __init__(
        self,
        verbosity: Verbosity,
        path: str | Path,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize file handler.

        Args:
            verbosity: Which severities are written
            path: Target log file, created on first write
            clock: Returns the current UTC time
        """
        self.verbosity = Verbosity.parse(verbosity)
        self.path = Path(path)
        self.clock = clock

    @classmethod
    def from_config(cls, config: HandlerConfig) -> "FileHandler":
        """Create a FileHandler from handler configuration."""
        return cls(verbosity=config.verbosity, path=config.file_path)

    def format_line(self, event: LogEvent) -> str:
        timestamp = format_timestamp(self.clock())
        message = event.document.plain(indent=DEFAULT_INDENT)
        return f"[{timestamp} {event.severity.label}] {message}\n"

    def handle(self, event: LogEvent) -> None:
        if not self.verbosity.admits(event.severity):
            return

        line = self.format_line(event)
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except (OSError, ValueError) as e:
            # ValueError covers text that cannot be encoded as UTF-8
            print(
                f"joblog: failed to write log file {self.path}: {e}",
                file=sys.stderr,
                flush=True,
            )
