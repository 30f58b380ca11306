"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed framerev package.
"""

from datetime import datetime, timezone

import pytest

from framerev.config import get_settings
from framerev.kernel.record import RevisionRecord
from framerev.kernel.schema import Column, EdgeSchema, TabularSchema, VertexSchema
from framerev.kernel.status import Status

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from FRAMEREV_* variables in the environment and from each other."""
    monkeypatch.delenv("FRAMEREV_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sales_frame() -> RevisionRecord:
    """A materialized plain frame with every inheritable field set."""
    return RevisionRecord(
        id=5,
        name="sales",
        schema=TabularSchema(columns=[Column(name="region", data_type="string"),
                                      Column(name="amount", data_type="float64")]),
        status=Status.ACTIVE,
        created_on=T0,
        modified_on=T0,
        storage_format="parquet",
        storage_location="/data/frames/5",
        description="sales.csv",
        row_count=1200,
        command=3,
        created_by=9,
        modified_by=9,
        materialized_on=T0,
        materialization_complete=T0,
        error_frame_id=6,
        graph_id=None,
    )


@pytest.fixture
def vertex_frame() -> RevisionRecord:
    return RevisionRecord(id=20, schema=VertexSchema(label="person"), graph_id=2, created_on=T0)


@pytest.fixture
def edge_frame() -> RevisionRecord:
    return RevisionRecord(
        id=21,
        schema=EdgeSchema(label="knows", src_vertex_label="person", dest_vertex_label="person"),
        graph_id=2,
        created_on=T0,
    )
