"""Lifecycle status values and storage format identifiers."""

from enum import Enum


class Status(int, Enum):
    """Lifecycle status of a revision, stored as an integer in the metadata DB.

    DELETED can be undone; DELETE_FINAL cannot.
    """

    ACTIVE = 1
    DELETED = 2
    DELETE_FINAL = 3


class StorageFormat(str, Enum):
    """Known physical storage formats for materialized frames."""

    PARQUET = "parquet"  # columnar
    SEQUENCE = "sequence"
