# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""In-memory document store for testing and local development."""

import copy
import logging
import uuid
from collections import defaultdict
from typing import Any

from .document_store import DocumentStore, DocumentStoreNotConnectedError

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """In-memory document store implementation for testing."""

    def __init__(self, require_connection: bool = False):
        """Initialize in-memory document store.

        Args:
            require_connection: If True, inserts fail until connect() is called
        """
        self.collections: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)
        self.require_connection = require_connection
        self.connected = False

    def connect(self) -> None:
        """Pretend to connect.

        Note: Always succeeds for in-memory store
        """
        self.connected = True
        logger.debug("InMemoryDocumentStore: connected")

    def disconnect(self) -> None:
        """Pretend to disconnect."""
        self.connected = False
        logger.debug("InMemoryDocumentStore: disconnected")

    def insert_document(self, collection: str, doc: dict[str, Any]) -> str:
        """Insert a document into the specified collection.

        Args:
            collection: Name of the collection
            doc: Document data as dictionary

        Returns:
            Document ID as string

        Raises:
            DocumentStoreNotConnectedError: If require_connection is set and
                the store is not connected
        """
        if self.require_connection and not self.connected:
            raise DocumentStoreNotConnectedError("Not connected to in-memory store")

        doc_id = doc.get("_id", str(uuid.uuid4()))

        # Deep copy so later mutations by the caller do not alter stored data
        doc_copy = copy.deepcopy(doc)
        doc_copy["_id"] = doc_id

        self.collections[collection][doc_id] = doc_copy
        logger.debug("InMemoryDocumentStore: inserted document %s into %s", doc_id, collection)

        return doc_id

    def documents(self, collection: str) -> list[dict[str, Any]]:
        """Return copies of every document in a collection, in insertion order."""
        return [copy.deepcopy(doc) for doc in self.collections[collection].values()]

    def clear_collection(self, collection: str) -> None:
        """Remove all documents from a collection (useful for testing)."""
        self.collections[collection].clear()
