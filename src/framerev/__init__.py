"""framerev: versioned metadata model for frame revisions."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("framerev")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from framerev.codes import InvariantCode
from framerev.errors import (
    FrameRevisionError,
    IllegalTransitionError,
    InvalidRecordError,
    LineageCycleError,
    MissingStorageLocationError,
)
from framerev.kernel.schema import Column, EdgeSchema, Schema, TabularSchema, VertexSchema, empty_schema
from framerev.kernel.status import Status, StorageFormat
from framerev.kernel.record import FrameReference, RevisionRecord

__all__ = [
    "__version__",
    "Column",
    "EdgeSchema",
    "FrameReference",
    "FrameRevisionError",
    "IllegalTransitionError",
    "InvalidRecordError",
    "InvariantCode",
    "LineageCycleError",
    "MissingStorageLocationError",
    "RevisionRecord",
    "Schema",
    "Status",
    "StorageFormat",
    "TabularSchema",
    "VertexSchema",
    "empty_schema",
]
