"""
Top‑level API router.

Resource routers are mounted here under their collection path.  The
user routes live at ``/users`` with no version prefix.
"""

from fastapi import APIRouter

from .endpoints import users


router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
