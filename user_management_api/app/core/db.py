"""
MongoDB integration.

Bootstrapping the store is split into explicit steps so each can be
exercised on its own:

* ``connect`` creates the process‑wide client and verifies the server
  answers a ping.
* ``get_collection`` resolves the users collection from settings.
* ``ensure_indexes`` provisions the unique index on ``username`` that
  the persistence layer relies on to reject duplicates.

Both ``connect`` and ``ensure_indexes`` raise ``StoreUnavailable`` on
failure; the application treats either as fatal at startup.
"""

import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Settings
from .errors import StoreUnavailable


logger = logging.getLogger(__name__)

USERNAME_INDEX = "username_unique"


def connect(app_settings: Settings) -> MongoClient:
    """Create a client for ``app_settings.mongodb_uri`` and ping the server."""
    timeout_ms = int(app_settings.request_timeout * 1000)
    client = MongoClient(app_settings.mongodb_uri, serverSelectionTimeoutMS=timeout_ms)
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        logger.error("Could not connect to MongoDB: %s", exc)
        raise StoreUnavailable(f"Could not connect to MongoDB: {exc}") from exc
    logger.info("Connected to MongoDB")
    return client


def get_collection(client: MongoClient, app_settings: Settings) -> Collection:
    return client[app_settings.database_name][app_settings.collection_name]


def ensure_indexes(collection: Collection) -> None:
    """Create the unique ``username`` index if it does not exist yet.

    Creating an index that already exists with the same options is a
    no‑op in MongoDB, so this is safe to run on every startup.
    """
    try:
        collection.create_index([("username", ASCENDING)], unique=True, name=USERNAME_INDEX)
    except PyMongoError as exc:
        logger.error("Could not create index on %s.username: %s", collection.name, exc)
        raise StoreUnavailable(f"Could not create username index: {exc}") from exc
    logger.info("Ensured unique index on %s.username", collection.name)
