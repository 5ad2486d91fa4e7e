"""FastAPI dependencies shared by the API routers."""

from fastapi import HTTPException, Request, status

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` built at application startup.

    Tests replace this dependency through ``app.dependency_overrides``
    to inject a service backed by a test double.
    """
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User store is not initialised",
        )
    return service
