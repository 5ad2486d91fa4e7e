"""
Persistence adapter for users.

``UserService`` is a thin façade over a single MongoDB collection.  It
never checks ``username`` uniqueness itself: the collection carries a
unique index (see ``core.db.ensure_indexes``) and the store's
``DuplicateKeyError`` is surfaced as ``UniquenessViolation``.  Any other
driver failure, including the per‑call deadline expiring, becomes
``StoreUnavailable``.  No call is retried.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List

import pymongo
from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..core.errors import StoreUnavailable, UniquenessViolation, UserNotFound
from ..schemas.user import User, UserCreate, UserUpdate


logger = logging.getLogger(__name__)


class UserService:
    """CRUD operations on the users collection.

    Parameters
    ----------
    collection : Collection
        The collection holding user documents.  It is shared across
        requests; the driver handles concurrent use.
    timeout : float
        Deadline in seconds applied to each store call.
    """

    def __init__(self, collection: Collection, timeout: float = 10.0) -> None:
        self.collection = collection
        self.timeout = timeout

    @contextmanager
    def _store_call(self, action: str) -> Iterator[None]:
        with pymongo.timeout(self.timeout):
            try:
                yield
            except DuplicateKeyError as exc:
                raise UniquenessViolation() from exc
            except PyMongoError as exc:
                logger.error("Store failure while trying to %s: %s", action, exc)
                raise StoreUnavailable(f"Could not {action}: {exc}") from exc

    def list_users(self) -> List[User]:
        """Return every stored user in natural store order."""
        with self._store_call("list users"):
            documents = list(self.collection.find({}))
        return [User.from_document(doc) for doc in documents]

    def get_user(self, user_id: ObjectId) -> User:
        with self._store_call("fetch user"):
            document = self.collection.find_one({"_id": user_id})
        if document is None:
            raise UserNotFound()
        return User.from_document(document)

    def create_user(self, data: UserCreate) -> User:
        """Insert a new user and return it with the store‑assigned id."""
        document = data.to_document()
        with self._store_call("create user"):
            result = self.collection.insert_one(document)
        logger.info("Created user %s (%s)", result.inserted_id, document.get("username"))
        return User.from_document({**document, "_id": result.inserted_id})

    def update_user(self, user_id: ObjectId, data: UserUpdate) -> bool:
        """Set the fields present in ``data`` on the matching document.

        Returns ``False`` when no document has ``user_id``.  A patch with
        no fields only checks that the document exists.
        """
        changes = data.to_document()
        with self._store_call("update user"):
            if not changes:
                return self.collection.count_documents({"_id": user_id}, limit=1) > 0
            result = self.collection.update_one({"_id": user_id}, {"$set": changes})
        if result.matched_count:
            logger.info("Updated user %s fields %s", user_id, sorted(changes))
        return result.matched_count > 0

    def delete_user(self, user_id: ObjectId) -> bool:
        with self._store_call("delete user"):
            result = self.collection.delete_one({"_id": user_id})
        if result.deleted_count:
            logger.info("Deleted user %s", user_id)
        return result.deleted_count > 0
