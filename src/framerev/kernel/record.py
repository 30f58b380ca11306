"""Revision records: one immutable snapshot of a frame's metadata.

The user experience is that frames are mutable, but under the covers every
change produces a new revision. A revision is never mutated after
construction; "updates" go through ``with_overrides`` (copy with re-validation)
and new lineage steps go through ``create_child``.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, model_validator
from pydantic.alias_generators import to_camel, to_snake

from framerev.codes import InvariantCode
from framerev.errors import InvalidRecordError, MissingStorageLocationError
from framerev.kernel.schema import EdgeSchema, Schema, VertexSchema, empty_schema
from framerev.kernel.status import Status, StorageFormat

logger = logging.getLogger(__name__)

# Fields whose type errors map onto a dedicated invariant code
_FIELD_CODES = {
    "id": InvariantCode.INVALID_ID,
    "name": InvariantCode.INVALID_NAME,
    "parent": InvariantCode.INVALID_PARENT,
    "graph_id": InvariantCode.INVALID_GRAPH_ID,
}

ENTITY_TYPE_FRAME = "frame:"
ENTITY_TYPE_VERTEX = "frame:vertex"
ENTITY_TYPE_EDGE = "frame:edge"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _default_from_created_on(data: Dict[str, Any]) -> datetime:
    return data.get("created_on") or _now()


class FrameReference(BaseModel):
    """Lightweight handle to a revision by id."""
    id: int

    model_config = ConfigDict(frozen=True)

    @property
    def uri(self) -> str:
        return f"frames/{self.id}"


class RevisionRecord(BaseModel):
    """A particular revision of a frame, as stored in the frame table of the metadata DB.

    Reference fields (parent, command, created_by, modified_by, error_frame_id,
    graph_id) are ids only; they are never resolved here.

    Attributes:
        id: unique id assigned by the database on insert; 0 until then
        name: user-assigned name; if set it must not be empty or whitespace
        frame_schema: the frame's columns and vertex/edge shape (alias ``schema``)
        status: lifecycle status (ACTIVE, DELETED with un-delete possible, DELETE_FINAL)
        created_on: when this revision was created
        modified_on: when this revision was last modified
        storage_format: physical format, e.g. "parquet"; absent until materialized
        storage_location: physical path; absent until materialized
        description: free text, e.g. the name of the input file
        row_count: number of rows, set once materialized
        command: id of the command that produced this revision
        created_by: user who created this revision
        modified_by: user who last modified this revision
        materialized_on: start of materialization
        materialization_complete: end of materialization
        error_frame_id: the frame holding parse errors for this one
        parent: the previous revision of this frame as understood by the user
        graph_id: set when the frame is owned by a graph instead of standing alone
        last_read_date: advisory, used by retention policies; defaults to created_on,
            so a record loaded with an old created_on and no last_read_date reads
            as last touched at creation, not at load time
    """
    id: StrictInt = 0
    name: Optional[str] = None
    frame_schema: Schema = Field(default_factory=empty_schema, alias="schema")
    status: Status = Status.ACTIVE
    created_on: datetime = Field(default_factory=_now)
    modified_on: datetime = Field(default_factory=_default_from_created_on)
    storage_format: Optional[str] = None
    storage_location: Optional[str] = None
    description: Optional[str] = None
    row_count: Optional[StrictInt] = Field(None, ge=0)
    command: Optional[StrictInt] = None
    created_by: Optional[StrictInt] = None
    modified_by: Optional[StrictInt] = None
    materialized_on: Optional[datetime] = None
    materialization_complete: Optional[datetime] = None
    error_frame_id: Optional[StrictInt] = None
    parent: Optional[StrictInt] = None
    graph_id: Optional[StrictInt] = None
    last_read_date: datetime = Field(default_factory=_default_from_created_on)

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,  # stored rows may use camelCase column names
        populate_by_name=True,
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _invalid_record_from(e) from e

    @model_validator(mode="after")
    def check_invariants(self) -> "RevisionRecord":
        """Structural invariants; never consults external state.

        Raises InvalidRecordError directly (it is not a ValueError, so
        pydantic lets it through unwrapped).
        """
        if self.id < 0:
            raise InvalidRecordError(
                InvariantCode.INVALID_ID, f"id must be zero or greater, got {self.id}", "id"
            )
        if self.name is not None and not self.name.strip():
            raise InvalidRecordError(
                InvariantCode.INVALID_NAME, "if name is set it must not be empty or whitespace", "name"
            )
        if self.parent is not None and self.parent <= 0:
            raise InvalidRecordError(
                InvariantCode.INVALID_PARENT,
                f"parent must be one or greater if provided, got {self.parent}",
                "parent",
            )
        if self.graph_id is not None and self.graph_id < 0:
            raise InvalidRecordError(
                InvariantCode.INVALID_GRAPH_ID,
                f"graph_id must be zero or greater if provided, got {self.graph_id}",
                "graph_id",
            )
        return self

    @classmethod
    def from_stored(cls, row: Mapping[str, Any]) -> "RevisionRecord":
        """Build a record from stored fields (snake_case or camelCase keys)."""
        return cls(**dict(row))

    @property
    def uri(self) -> str:
        return self.to_reference().uri

    def to_reference(self) -> FrameReference:
        return FrameReference(id=self.id)

    def with_overrides(self, **changes: Any) -> "RevisionRecord":
        """Return a new record with ``changes`` applied, fully re-validated.

        ``schema`` is accepted as an alias for ``frame_schema``. This is how the
        persistence layer assigns the real id after insert.
        """
        if "schema" in changes:
            changes["frame_schema"] = changes.pop("schema")
        fields = type(self).model_fields
        unknown = sorted(set(changes) - set(fields))
        if unknown:
            raise InvalidRecordError(
                InvariantCode.UNKNOWN_FIELD, f"Unknown record fields: {unknown}", unknown[0]
            )
        data = {name: getattr(self, name) for name in fields}
        data.update(changes)
        return type(self)(**data)

    def with_schema(self, schema: Schema) -> "RevisionRecord":
        return self.with_overrides(frame_schema=schema)

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "RevisionRecord":
        """Copy the record; any ``update`` is re-validated through ``with_overrides``."""
        copied = self.with_overrides(**dict(update)) if update else self
        return super(RevisionRecord, copied).model_copy(deep=deep)

    @classmethod
    def model_construct(cls, _fields_set: Optional[set] = None, **values: Any) -> "RevisionRecord":
        """Build a record from stored values; unlike BaseModel.model_construct this validates."""
        return cls(**values)

    def is_status(self, status: Status) -> bool:
        return self.status == status

    @property
    def is_vertex_frame(self) -> bool:
        return isinstance(self.frame_schema, VertexSchema)

    @property
    def is_edge_frame(self) -> bool:
        return isinstance(self.frame_schema, EdgeSchema)

    def entity_type(self) -> str:
        """Prefix used by plugin dispatch; a stable routing key."""
        if self.is_vertex_frame:
            return ENTITY_TYPE_VERTEX
        if self.is_edge_frame:
            return ENTITY_TYPE_EDGE
        return ENTITY_TYPE_FRAME

    def label(self) -> Optional[str]:
        """Label if this is a vertex or edge frame."""
        if isinstance(self.frame_schema, (VertexSchema, EdgeSchema)):
            return self.frame_schema.label
        return None

    def is_columnar_format(self) -> bool:
        """True if the frame is stored in the columnar (parquet) format."""
        return (
            self.storage_format is not None
            and self.storage_format == StorageFormat.PARQUET.value
        )

    def require_storage_location(self) -> str:
        if self.storage_location is None:
            raise MissingStorageLocationError(self.debug_summary())
        return self.storage_location

    def debug_summary(self) -> str:
        """A minimal one-line rendering for log messages (not a stable format)."""
        return (
            f"frameId: {self.id}, name: {self.name}, rowCount: {self.row_count}, "
            f"storageFormat: {self.storage_format}, storageLocation: {self.storage_location}"
        )

    def create_child(
        self,
        created_by: Optional[int],
        command: Optional[int],
        schema: Optional[Schema] = None,
    ) -> "RevisionRecord":
        """Create the next revision in this frame's lineage.

        A child is a copy, but not all fields are inherited. Reset: id (to 0,
        assigned on insert), name, status (to ACTIVE), schema (to ``schema``),
        row_count, created_on/modified_on (to now), created_by, modified_by,
        materialized_on, materialization_complete, storage_location, command,
        parent (to this record's id) and graph_id. Everything else, notably
        description, storage_format, error_frame_id and last_read_date, is
        inherited verbatim.

        The parent must already have a database id: a record with id 0 cannot
        be a parent.
        """
        now = _now()
        child = self.with_overrides(
            id=0,  # auto-assigned on insert
            name=None,
            status=Status.ACTIVE,
            frame_schema=schema if schema is not None else empty_schema(),
            row_count=None,
            created_on=now,
            created_by=created_by,
            modified_on=now,
            modified_by=None,
            materialized_on=None,
            materialization_complete=None,
            storage_location=None,
            command=command,
            parent=self.id,
            # TODO: inherit graph_id once lazy materialization keeps it on old revisions
            graph_id=None,
        )
        logger.debug(
            "Created child revision (%s) of %s for command %s",
            child.entity_type(),
            self.debug_summary(),
            command,
        )
        return child


def _invalid_record_from(error: ValidationError) -> InvalidRecordError:
    """Translate pydantic's first error into an InvalidRecordError with an invariant code."""
    first = error.errors()[0]
    loc = first.get("loc") or ()
    field = to_snake(str(loc[0])) if loc else None
    if first.get("type") == "extra_forbidden":
        code = InvariantCode.UNKNOWN_FIELD
    else:
        code = _FIELD_CODES.get(field, InvariantCode.MALFORMED_FIELD)
    return InvalidRecordError(code, str(error), field)
