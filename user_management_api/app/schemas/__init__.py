"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persistence adapter so that the wire
representation of a user is defined in exactly one place.
"""
