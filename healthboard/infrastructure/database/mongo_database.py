"""
MongoDB Database - Infrastructure Layer

Thin wrapper over the pymongo client. The diagnostics subsystem only
needs to know whether the database answers and how fast.
"""

import threading
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.database import Database


class MongoDatabase:
    """MongoDB database client."""

    def __init__(
        self,
        mongo_uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 2000,
    ):
        """
        Initialize the MongoDB database client.

        The pymongo client is only built on first use. A ``mongodb+srv://``
        URI resolves its DNS records at construction, so an unresolvable
        host surfaces as a failed ping instead of a failed startup.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            server_selection_timeout_ms: Upper bound for each server lookup
        """
        self._mongo_uri = mongo_uri
        self._db_name = db_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[MongoClient] = None
        self._lock = threading.Lock()

    @property
    def client(self) -> MongoClient:
        """
        The pymongo client, created on first access.

        Raises:
            pymongo.errors.ConfigurationError: If the URI cannot be resolved
        """
        with self._lock:
            if self._client is None:
                self._client = MongoClient(
                    self._mongo_uri,
                    serverSelectionTimeoutMS=self._server_selection_timeout_ms,
                    connectTimeoutMS=self._server_selection_timeout_ms,
                )
            return self._client

    @property
    def db(self) -> Database:
        return self.client[self._db_name]

    @property
    def name(self) -> str:
        return self._db_name

    def ping(self) -> Dict[str, Any]:
        """
        Run the ``ping`` admin command. Blocking.

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        return self.client.admin.command("ping")

    def close(self) -> None:
        """Close the MongoDB connection if one was opened."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()
