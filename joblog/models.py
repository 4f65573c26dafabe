# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Domain values logged by job workers and the stored row shape."""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .levels import Severity

_PACKAGE_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


@dataclass(frozen=True)
class PackageName:
    """Name of a package, e.g. ``text-utils``."""

    value: str

    def __post_init__(self) -> None:
        if not _PACKAGE_NAME_RE.match(self.value):
            raise ValueError(f"Invalid package name: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Version:
    """Dotted numeric version such as ``1.2.0``."""

    components: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.components:
            raise ValueError("Version must have at least one component")
        if any(c < 0 for c in self.components):
            raise ValueError(f"Version components must be non-negative: {self.components}")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse ``"1.2.3"`` into a Version.

        Raises:
            ValueError: If the text is not a dotted list of integers
        """
        try:
            return cls(tuple(int(part) for part in text.strip().split(".")))
        except ValueError:
            raise ValueError(f"Invalid version: {text!r}") from None

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)


@dataclass(frozen=True)
class VersionRange:
    """Interval of versions with optional bounds.

    Both bounds ``None`` means any version. ``lower`` is inclusive by
    default and ``upper`` exclusive, the usual ``>=a && <b`` shape.
    """

    lower: Version | None = None
    upper: Version | None = None
    lower_inclusive: bool = True
    upper_inclusive: bool = False

    @classmethod
    def exactly(cls, version: Version) -> "VersionRange":
        return cls(lower=version, upper=version, upper_inclusive=True)

    @property
    def is_any(self) -> bool:
        return self.lower is None and self.upper is None

    @property
    def is_exact(self) -> bool:
        return (
            self.lower is not None
            and self.lower == self.upper
            and self.lower_inclusive
            and self.upper_inclusive
        )

    def contains(self, version: Version) -> bool:
        """Returns True if the version lies within the range."""
        if self.lower is not None:
            if version < self.lower or (version == self.lower and not self.lower_inclusive):
                return False
        if self.upper is not None:
            if version > self.upper or (version == self.upper and not self.upper_inclusive):
                return False
        return True

    def __str__(self) -> str:
        if self.is_any:
            return "any version"
        if self.is_exact:
            return f"=={self.lower}"
        parts = []
        if self.lower is not None:
            parts.append(f"{'>=' if self.lower_inclusive else '>'}{self.lower}")
        if self.upper is not None:
            parts.append(f"{'<=' if self.upper_inclusive else '<'}{self.upper}")
        return " && ".join(parts)


@dataclass(frozen=True)
class LogRow:
    """One stored log record tied to a job."""

    timestamp: datetime
    severity: Severity
    job_id: str
    message: str

    def to_document(self) -> dict[str, Any]:
        """Mapping inserted into the document store."""
        return {
            "timestamp": self.timestamp,
            "level": self.severity.label,
            "jobId": self.job_id,
            "message": self.message,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "LogRow":
        """Rebuild a row from a stored mapping.

        Raises:
            KeyError: If a required field is missing
            ValueError: If the level is not a known severity
        """
        timestamp = doc["timestamp"]
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        if timestamp.tzinfo is None:
            # pymongo returns naive UTC datetimes unless tz_aware is set
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return cls(
            timestamp=timestamp,
            severity=Severity.parse(doc["level"]),
            job_id=doc["jobId"],
            message=doc["message"],
        )
