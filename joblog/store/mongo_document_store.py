# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""MongoDB document store implementation."""

import logging
from typing import Any

from .document_store import (
    DocumentStore,
    DocumentStoreConnectionError,
    DocumentStoreError,
    DocumentStoreNotConnectedError,
)

logger = logging.getLogger(__name__)


class MongoDocumentStore(DocumentStore):
    """MongoDB document store implementation."""

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        username: str | None = None,
        password: str | None = None,
        database: str | None = None,
        **kwargs: Any,
    ):
        """Initialize MongoDB document store.

        Args:
            host: MongoDB host (required)
            port: MongoDB port (required)
            username: MongoDB username (optional)
            password: MongoDB password (optional)
            database: Database name (required)
            **kwargs: Additional MongoClient options

        Raises:
            ValueError: If host, port or database is not provided
        """
        if not host:
            raise ValueError(
                "MongoDB host is required. "
                "Provide the MongoDB server hostname or IP address."
            )
        if port is None:
            raise ValueError(
                "MongoDB port is required. "
                "Provide the MongoDB server port number."
            )
        if not database:
            raise ValueError(
                "MongoDB database is required. "
                "Provide the database name to use."
            )

        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.database_name = database
        self.client_options = kwargs
        self.client = None
        self.database = None

    def connect(self) -> None:
        """Connect to MongoDB.

        Raises:
            DocumentStoreConnectionError: If connection fails
        """
        from pymongo import MongoClient
        from pymongo.errors import ConnectionFailure

        try:
            connection_params: dict[str, Any] = {
                "host": self.host,
                "port": self.port,
                "tz_aware": True,
            }

            if self.username and self.password:
                connection_params["username"] = self.username
                connection_params["password"] = self.password
                if "authSource" not in self.client_options:
                    connection_params["authSource"] = "admin"

            connection_params.update(self.client_options)

            self.client = MongoClient(**connection_params)
            self.client.admin.command("ping")
            self.database = self.client[self.database_name]

            logger.info("MongoDocumentStore: connected to %s:%s/%s", self.host, self.port, self.database_name)

        except ConnectionFailure as e:
            logger.error("MongoDocumentStore: connection failed - %s", e, exc_info=True)
            raise DocumentStoreConnectionError(f"Failed to connect to MongoDB at {self.host}:{self.port}") from e
        except Exception as e:
            logger.error("MongoDocumentStore: unexpected error during connect - %s", e, exc_info=True)
            raise DocumentStoreConnectionError(f"Unexpected error connecting to MongoDB: {e}") from e

    def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.database = None
            logger.info("MongoDocumentStore: disconnected")

    def insert_document(self, collection: str, doc: dict[str, Any]) -> str:
        """Insert a document into the specified collection.

        Args:
            collection: Name of the collection
            doc: Document data as dictionary

        Returns:
            Document ID as string

        Raises:
            DocumentStoreNotConnectedError: If not connected to MongoDB
            DocumentStoreError: If the insert fails
        """
        if self.database is None:
            raise DocumentStoreNotConnectedError("Not connected to MongoDB")

        try:
            # insert_one adds _id to the mapping it is given
            result = self.database[collection].insert_one(dict(doc))
        except Exception as e:
            logger.error("MongoDocumentStore: insert failed - %s", e)
            raise DocumentStoreError(f"Failed to insert document into {collection}") from e

        doc_id = str(result.inserted_id)
        logger.debug("MongoDocumentStore: inserted document %s into %s", doc_id, collection)
        return doc_id
