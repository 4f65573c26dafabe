# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Factory functions for creating handler instances."""

from collections.abc import Iterable

from .config import HandlerConfig
from .database_handler import DatabaseHandler
from .file_handler import FileHandler
from .handler import LogHandler, compose
from .levels import Verbosity
from .memory_handler import MemoryHandler
from .store import DocumentStore, create_document_store
from .terminal_handler import TerminalHandler


def create_handler(
    config: HandlerConfig | None = None,
    store: DocumentStore | None = None,
) -> LogHandler:
    """Factory function to create a handler instance.

    Args:
        config: Handler settings. Defaults to HandlerConfig.from_env().
        store: Document store for the database handler. When omitted, a
            store of ``config.store_type`` is created and connected, and the
            handler disconnects it on close().

    Returns:
        LogHandler instance

    Raises:
        ValueError: If a database handler is requested without a job_id

    Example:
        >>> handler = create_handler(HandlerConfig(handler_type="terminal", verbosity="verbose"))
        >>> handler = create_handler(HandlerConfig(handler_type="file", file_path="build.log"))
        >>> handler = create_handler(
        ...     HandlerConfig(handler_type="database", job_id="job-42"),
        ...     store=InMemoryDocumentStore(),
        ... )
    """
    if config is None:
        config = HandlerConfig.from_env()

    if config.handler_type == "terminal":
        return TerminalHandler.from_config(config)
    elif config.handler_type == "file":
        return FileHandler.from_config(config)
    elif config.handler_type == "memory":
        return MemoryHandler()

    # database
    if not config.job_id:
        raise ValueError(
            "job_id is required for the database handler. "
            "Provide it explicitly or through LOG_JOB_ID."
        )
    owns_store = store is None
    if store is None:
        store = create_document_store(config.store_type)
        store.connect()
    return DatabaseHandler(
        store=store,
        job_id=config.job_id,
        collection=config.collection,
        owns_store=owns_store,
    )


def create_handlers(
    configs: Iterable[HandlerConfig],
    store: DocumentStore | None = None,
) -> LogHandler:
    """Create one handler per config and compose them into a fan-out."""
    return compose(*(create_handler(config, store=store) for config in configs))


def create_terminal_handler(verbosity: str | Verbosity = Verbosity.NORMAL) -> TerminalHandler:
    """Create a terminal handler writing to stdout."""
    return TerminalHandler(verbosity=Verbosity.parse(verbosity))
