"""Frame schema models: plain tabular, vertex and edge variants.

The three variants form one tagged union (``Schema``) discriminated by
``kind``, so stored schema dicts parse back into the right variant.
"""

from typing import Annotated, Iterable, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Column(BaseModel):
    """A single named, typed column."""
    name: str
    data_type: str  # int32, int64, float32, float64, string, vector, ...

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("column name must not be empty or whitespace")
        return v


class _SchemaBase(BaseModel):
    columns: Tuple[Column, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: Tuple[Column, ...]) -> Tuple[Column, ...]:
        """Reject duplicate column names (order is preserved)."""
        seen = set()
        duplicates = set()
        for column in v:
            if column.name in seen:
                duplicates.add(column.name)
            seen.add(column.name)
        if duplicates:
            raise ValueError(f"Duplicate column names not allowed: {sorted(duplicates)}")
        return v

    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def has_column(self, name: str) -> bool:
        return self.column(name) is not None

    def column(self, name: str) -> Optional[Column]:
        """Get column by name, or None when the schema has no such column."""
        for c in self.columns:
            if c.name == name:
                return c
        return None

    def add_columns(self, columns: Iterable[Column]):
        """Return a new schema of the same variant with ``columns`` appended.

        Goes through full validation, so duplicates are rejected.
        """
        data = self.model_dump()
        data["columns"] = list(self.columns) + list(columns)
        return type(self)(**data)


class TabularSchema(_SchemaBase):
    """Plain frame schema: just columns."""
    kind: Literal["tabular"] = "tabular"


class VertexSchema(_SchemaBase):
    """Schema of a vertex frame; one frame per vertex label."""
    kind: Literal["vertex"] = "vertex"
    label: str
    id_column_name: str = "_vid"


class EdgeSchema(_SchemaBase):
    """Schema of an edge frame; one frame per edge label.

    The source and destination vertex labels name the vertex frames the
    edges point between.
    """
    kind: Literal["edge"] = "edge"
    label: str
    src_vertex_label: Optional[str] = None
    dest_vertex_label: Optional[str] = None
    directed: bool = True

    def vertex_labels(self) -> Tuple[Optional[str], Optional[str]]:
        return (self.src_vertex_label, self.dest_vertex_label)


Schema = Annotated[Union[TabularSchema, VertexSchema, EdgeSchema], Field(discriminator="kind")]


def empty_schema() -> TabularSchema:
    """The default schema for a record: tabular with no columns."""
    return TabularSchema()
