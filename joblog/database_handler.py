# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Database handler storing one row per event for a job."""

import logging
from collections.abc import Callable
from datetime import datetime

from .config import DEFAULT_COLLECTION
from .document import DEFAULT_INDENT
from .events import LogEvent
from .file_handler import utc_now
from .handler import LogHandler
from .models import LogRow
from .store import DocumentStore

logger = logging.getLogger(__name__)


class DatabaseHandler(LogHandler):
    """Handler that inserts every event into a document store.

    There is no verbosity filter: each event becomes exactly one row
    ``{timestamp, level, jobId, message}``.

    Insert failures are not handled here. The store's exception is logged
    and re-raised, so it reaches the code that emitted the event; there is
    no retry.
    """

    def __init__(
        self,
        store: DocumentStore,
        job_id: str,
        collection: str = DEFAULT_COLLECTION,
        clock: Callable[[], datetime] = utc_now,
        owns_store: bool = False,
    ):
        """Initialize database handler.

        Args:
            store: Connected document store
            job_id: Identifier tying rows to a unit of work
            collection: Collection the rows go to
            clock: Returns the current UTC time
            owns_store: If True, close() disconnects the store
        """
        self.store = store
        self.job_id = job_id
        self.collection = collection
        self.clock = clock
        self.owns_store = owns_store

    def build_row(self, event: LogEvent) -> LogRow:
        return LogRow(
            timestamp=self.clock(),
            severity=event.severity,
            job_id=self.job_id,
            message=event.document.plain(indent=DEFAULT_INDENT),
        )

    def handle(self, event: LogEvent) -> None:
        row = self.build_row(event)
        try:
            self.store.insert_document(self.collection, row.to_document())
        except Exception as e:
            logger.error(
                "DatabaseHandler: failed to store log row for job %s - %s", self.job_id, e
            )
            raise

    def close(self) -> None:
        if self.owns_store:
            self.store.disconnect()
