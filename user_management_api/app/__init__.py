"""
Application package initializer.

The project is split into a few small pieces: ``core`` holds
configuration, logging, errors and store bootstrap; ``schemas`` the
Pydantic models for the user resource; ``services`` the persistence
adapter; and ``api`` the routers that map HTTP verbs onto the service.
"""
