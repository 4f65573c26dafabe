# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Handler configuration with environment fallbacks."""

import os
from dataclasses import dataclass

from .levels import Verbosity

HANDLER_TYPES = ("terminal", "file", "database", "memory")
DEFAULT_HANDLER_TYPE = "terminal"
DEFAULT_FILE_PATH = "joblog.log"
DEFAULT_COLLECTION = "logs"


def _default(value: str | None, env_var: str, fallback: str | None) -> str | None:
    """Helper to pick an explicit value, then env var, then fallback."""
    return value or os.getenv(env_var) or fallback


@dataclass(frozen=True)
class HandlerConfig:
    """Settings needed to build one handler.

    Attributes:
        handler_type: One of "terminal", "file", "database", "memory"
        verbosity: Filter for the terminal and file handlers
        file_path: Target file for the file handler
        job_id: Job identifier for the database handler
        collection: Collection the database handler writes to
        store_type: Document store backend for the database handler
    """

    handler_type: str = DEFAULT_HANDLER_TYPE
    verbosity: Verbosity = Verbosity.NORMAL
    file_path: str = DEFAULT_FILE_PATH
    job_id: str | None = None
    collection: str = DEFAULT_COLLECTION
    store_type: str | None = None

    def __post_init__(self) -> None:
        handler_type = self.handler_type.lower()
        if handler_type not in HANDLER_TYPES:
            raise ValueError(
                f"Unknown handler_type: {self.handler_type}. "
                f"Must be one of: {', '.join(HANDLER_TYPES)}"
            )
        object.__setattr__(self, "handler_type", handler_type)
        object.__setattr__(self, "verbosity", Verbosity.parse(self.verbosity))

    @classmethod
    def from_env(
        cls,
        handler_type: str | None = None,
        verbosity: str | Verbosity | None = None,
        file_path: str | None = None,
        job_id: str | None = None,
        collection: str | None = None,
        store_type: str | None = None,
    ) -> "HandlerConfig":
        """Build a config from explicit values, then environment variables.

        Environment variables: LOG_TYPE, LOG_VERBOSITY, LOG_FILE, LOG_JOB_ID,
        LOG_COLLECTION, DOCUMENT_STORE_TYPE.

        Raises:
            ValueError: If the handler type or verbosity is not recognized
        """
        return cls(
            handler_type=_default(handler_type, "LOG_TYPE", DEFAULT_HANDLER_TYPE),
            verbosity=_default(verbosity, "LOG_VERBOSITY", Verbosity.NORMAL.value),
            file_path=_default(file_path, "LOG_FILE", DEFAULT_FILE_PATH),
            job_id=_default(job_id, "LOG_JOB_ID", None),
            collection=_default(collection, "LOG_COLLECTION", DEFAULT_COLLECTION),
            store_type=_default(store_type, "DOCUMENT_STORE_TYPE", None),
        )
