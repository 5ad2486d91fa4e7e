"""
API package containing the HTTP routers.

``router.py`` aggregates the domain routers defined in ``endpoints``;
the application includes that single router.
"""
