"""
ObjectId helpers
----------------

Identifiers arrive as hex strings in URLs and query params. A string that is
not a valid ObjectId maps to the all-zero ObjectId, which no stored document
carries, so lookups simply find nothing instead of failing.
"""
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId

NIL_OBJECT_ID = ObjectId("0" * 24)


def parse_object_id(value: Optional[str]) -> ObjectId:
    """Parse a hex string into an ObjectId, or NIL_OBJECT_ID if it is not one."""
    if not value:
        return NIL_OBJECT_ID
    try:
        return ObjectId(value.strip())
    except (InvalidId, TypeError):
        return NIL_OBJECT_ID
