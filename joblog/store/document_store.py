# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Abstract document store interface."""

import os
from abc import ABC, abstractmethod
from typing import Any


class DocumentStoreError(Exception):
    """Base exception for document store errors."""
    pass


class DocumentStoreNotConnectedError(DocumentStoreError):
    """Exception raised when attempting operations on a disconnected store."""
    pass


class DocumentStoreConnectionError(DocumentStoreError):
    """Exception raised when connection to the document store fails."""
    pass


class DocumentStore(ABC):
    """Abstract base class for document storage backends.

    Log rows are only ever appended, so the interface is limited to the
    connection lifecycle and insertion.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the document store.

        Raises:
            DocumentStoreConnectionError: If connection fails
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the document store."""
        pass

    @abstractmethod
    def insert_document(self, collection: str, doc: dict[str, Any]) -> str:
        """Insert a document into the specified collection.

        Args:
            collection: Name of the collection/table
            doc: Document data as dictionary

        Returns:
            Document ID as string

        Raises:
            DocumentStoreNotConnectedError: If the store is not connected
            DocumentStoreError: If insertion fails
        """
        pass


def create_document_store(store_type: str | None = None, **kwargs: Any) -> DocumentStore:
    """Factory function to create a document store.

    Args:
        store_type: Type of document store ("mongodb", "inmemory").
            If None, reads DOCUMENT_STORE_TYPE (defaults to "inmemory")
        **kwargs: Store-specific arguments. For MongoDB, missing connection
            settings are read from DOCUMENT_DATABASE_* environment variables.

    Returns:
        DocumentStore instance (not yet connected)

    Raises:
        ValueError: If store_type is not recognized
    """
    if store_type is None:
        store_type = os.getenv("DOCUMENT_STORE_TYPE", "inmemory")
    store_type = store_type.lower()

    if store_type == "mongodb":
        from .mongo_document_store import MongoDocumentStore

        # Explicit parameters take precedence over environment variables
        mongo_kwargs: dict[str, Any] = {
            "host": kwargs.pop("host", None) or os.getenv("DOCUMENT_DATABASE_HOST", "localhost"),
            "port": kwargs.pop("port", None) or int(os.getenv("DOCUMENT_DATABASE_PORT", "27017")),
            "database": kwargs.pop("database", None) or os.getenv("DOCUMENT_DATABASE_NAME", "joblog"),
        }

        username = kwargs.pop("username", None) or os.getenv("DOCUMENT_DATABASE_USER")
        if username is not None:
            mongo_kwargs["username"] = username
        password = kwargs.pop("password", None) or os.getenv("DOCUMENT_DATABASE_PASSWORD")
        if password is not None:
            mongo_kwargs["password"] = password

        mongo_kwargs.update(kwargs)
        return MongoDocumentStore(**mongo_kwargs)
    elif store_type == "inmemory":
        from .inmemory_document_store import InMemoryDocumentStore

        return InMemoryDocumentStore()
    else:
        raise ValueError(
            f"Unknown document store type: {store_type}. "
            f"Must be one of: mongodb, inmemory"
        )
