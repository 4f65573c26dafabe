# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Severity and verbosity enumerations."""

from enum import Enum, IntEnum


class Severity(IntEnum):
    """Importance of a log event, ordered DEBUG < INFO < WARN < ERROR."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def label(self) -> str:
        """Upper-case name used in file lines and stored rows."""
        return self.name

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        """Parse a severity name (case-insensitive, WARNING accepted).

        Raises:
            ValueError: If the name is not a known severity
        """
        if isinstance(value, Severity):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(
                f"Invalid severity: {value}. Must be one of {[s.name for s in cls]}"
            ) from None


class Verbosity(str, Enum):
    """Output filtering policy for the terminal and file handlers.

    - QUIET: nothing is written
    - NORMAL: everything but DEBUG is written
    - VERBOSE: everything is written
    """

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"

    def __str__(self) -> str:
        return self.value

    def admits(self, severity: Severity) -> bool:
        """Returns True if an event of this severity passes the filter."""
        if self is Verbosity.QUIET:
            return False
        if self is Verbosity.NORMAL:
            return severity != Severity.DEBUG
        return True

    @classmethod
    def parse(cls, value: "str | Verbosity") -> "Verbosity":
        """Parse a verbosity name (case-insensitive).

        Raises:
            ValueError: If the name is not a known verbosity
        """
        if isinstance(value, Verbosity):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid verbosity: {value}. Must be one of {[v.value for v in cls]}"
            ) from None
