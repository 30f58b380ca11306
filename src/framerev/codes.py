"""Invariant codes carried by InvalidRecordError.

These constants prevent stringly-typed failure reasons and let callers
branch on which invariant a rejected record violated.
"""

from enum import Enum


class InvariantCode(str, Enum):
    """Construction failure codes for revision records."""

    INVALID_ID = "INVALID_ID"
    INVALID_NAME = "INVALID_NAME"
    INVALID_PARENT = "INVALID_PARENT"
    INVALID_GRAPH_ID = "INVALID_GRAPH_ID"
    MISSING_GRAPH_ID = "MISSING_GRAPH_ID"

    # Anything pydantic rejects on a field with no dedicated invariant
    MALFORMED_FIELD = "MALFORMED_FIELD"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
