"""Tests for explicit graph ownership checks."""

import pytest

from framerev.codes import InvariantCode
from framerev.errors import InvalidRecordError
from framerev.kernel.ownership import check_graph_ownership, is_graph_owned
from framerev.kernel.record import RevisionRecord
from framerev.kernel.schema import EdgeSchema, VertexSchema


def test_graph_frames_without_graph_id_still_construct():
    """Ownership is not a construction invariant."""
    assert RevisionRecord(id=1, schema=VertexSchema(label="person")).graph_id is None


def test_check_rejects_unowned_graph_frames():
    with pytest.raises(InvalidRecordError) as exc_info:
        check_graph_ownership(RevisionRecord(id=1, schema=EdgeSchema(label="knows")))
    assert exc_info.value.code == InvariantCode.MISSING_GRAPH_ID


def test_check_passes_owned_and_plain_frames(vertex_frame, sales_frame):
    assert check_graph_ownership(vertex_frame) is vertex_frame
    assert check_graph_ownership(sales_frame) is sales_frame
    assert is_graph_owned(vertex_frame)
    assert not is_graph_owned(sales_frame)


def test_children_of_graph_frames_fail_the_check(vertex_frame):
    """create_child clears graph_id, so the collaborator must re-attach it."""
    child = vertex_frame.create_child(created_by=None, command=None, schema=vertex_frame.frame_schema)
    with pytest.raises(InvalidRecordError):
        check_graph_ownership(child)
    assert check_graph_ownership(child.with_overrides(graph_id=vertex_frame.graph_id)).graph_id == 2
