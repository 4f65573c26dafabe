# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Insert-only document storage used by the database handler."""

from .document_store import (
    DocumentStore,
    DocumentStoreConnectionError,
    DocumentStoreError,
    DocumentStoreNotConnectedError,
    create_document_store,
)
from .inmemory_document_store import InMemoryDocumentStore
from .mongo_document_store import MongoDocumentStore

__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
    "MongoDocumentStore",
    "create_document_store",
    "DocumentStoreError",
    "DocumentStoreNotConnectedError",
    "DocumentStoreConnectionError",
]
