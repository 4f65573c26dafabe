# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Memory handler for testing."""

from .events import LogEvent
from .handler import LogHandler
from .levels import Severity


class MemoryHandler(LogHandler):
    """Handler that keeps events in memory without output.

    Useful for testing code that logs. Note: MemoryHandler does not filter
    by verbosity - every event is captured.
    """

    def __init__(self):
        self.events: list[LogEvent] = []

    def handle(self, event: LogEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        """Clear all captured events."""
        self.events.clear()

    def get_events(self, severity: Severity | None = None) -> list[LogEvent]:
        """Get captured events, optionally filtered by severity."""
        if severity is None:
            return list(self.events)
        return [e for e in self.events if e.severity == severity]

    def messages(self, severity: Severity | None = None) -> list[str]:
        """Plain-text messages of the captured events."""
        return [e.document.plain() for e in self.get_events(severity)]

    def has_event(self, text: str, severity: Severity | None = None) -> bool:
        """Check whether a captured message contains ``text``.

        Args:
            text: Substring to search for
            severity: Optional severity to filter by

        Returns:
            True if a matching event was captured
        """
        return any(text in message for message in self.messages(severity))
