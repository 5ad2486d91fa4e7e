"""
Top‑level package for the User Management API.

All functionality lives in submodules under ``app``; import the ASGI
application with ``user_management_api.app.main:app``.
"""

__all__ = []
