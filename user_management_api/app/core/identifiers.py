"""
Conversion between store identifiers and their external string form.

Users are addressed in URLs and JSON by the 24‑character hexadecimal
rendering of their MongoDB ``ObjectId``.  Anything else is rejected
before the store is consulted.
"""

import re

from bson import ObjectId

from .errors import InvalidIdentifier


_OBJECT_ID_HEX = re.compile(r"[0-9a-fA-F]{24}")


def decode_id(external: str) -> ObjectId:
    """Parse ``external`` into an ``ObjectId``.

    Raises ``InvalidIdentifier`` unless the value is exactly 24 hex
    digits.  ``ObjectId`` itself also accepts 12‑byte values, which are
    not a valid external form here, hence the explicit pattern check.
    """
    if not isinstance(external, str) or not _OBJECT_ID_HEX.fullmatch(external):
        raise InvalidIdentifier(f"Invalid user id: {external!r}")
    return ObjectId(external)


def encode_id(internal: ObjectId) -> str:
    return str(internal)
