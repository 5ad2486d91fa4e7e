"""
User endpoints.

CRUD routes for the user resource.  Each handler decodes the path
identifier first, so a malformed id is rejected with HTTP 400 before
the store is touched, then calls ``UserService`` and translates its
errors into HTTP status codes.

Handlers are plain functions: the store driver is blocking, so FastAPI
runs each request in its worker thread pool.
"""

import logging
from typing import Dict, List, NoReturn

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.errors import StoreUnavailable, UserApiError, UserNotFound
from ...core.identifiers import decode_id
from ...schemas.user import User, UserCreate, UserUpdate
from ...services.user_service import UserService
from ..deps import get_user_service


logger = logging.getLogger(__name__)

router = APIRouter()


def _raise_http(exc: UserApiError, action: str) -> NoReturn:
    if isinstance(exc, StoreUnavailable):
        logger.error("Failed to %s: %s", action, exc.detail)
    else:
        logger.warning("Rejected %s: %s", action, exc.detail)
    raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get("", response_model=List[User])
def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return every user in the store, without pagination."""
    try:
        return service.list_users()
    except UserApiError as exc:
        _raise_http(exc, "list users")


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    """Retrieve a single user by id.

    Returns 400 for a malformed id and 404 if no user has that id.
    """
    try:
        return service.get_user(decode_id(user_id))
    except UserApiError as exc:
        _raise_http(exc, f"get user {user_id}")


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)) -> User:
    """Create a user.  The response carries the store‑assigned ``id``.

    A ``username`` that already exists is answered with 409 Conflict.
    """
    try:
        return service.create_user(user_in)
    except UserApiError as exc:
        _raise_http(exc, "create user")


@router.put("/{user_id}", response_model=Dict[str, str])
def update_user(
    user_id: str,
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> Dict[str, str]:
    """Set the supplied fields on an existing user.

    Fields missing from the body keep their stored values.  The response
    echoes exactly the fields that were applied, not the full document.
    """
    try:
        object_id = decode_id(user_id)
        if not service.update_user(object_id, user_in):
            raise UserNotFound()
    except UserApiError as exc:
        _raise_http(exc, f"update user {user_id}")
    return user_in.to_document()


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user by id.  A second delete of the same id returns 404."""
    try:
        object_id = decode_id(user_id)
        if not service.delete_user(object_id):
            raise UserNotFound()
    except UserApiError as exc:
        _raise_http(exc, f"delete user {user_id}")
    return None
