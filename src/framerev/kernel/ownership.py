"""Graph ownership checks for vertex and edge frames.

Not a record invariant: create_child clears graph_id, so children of graph
frames would fail. Collaborators that need strict ownership call this
explicitly.
"""

from framerev.codes import InvariantCode
from framerev.errors import InvalidRecordError
from framerev.kernel.record import RevisionRecord


def is_graph_owned(record: RevisionRecord) -> bool:
    return record.graph_id is not None


def check_graph_ownership(record: RevisionRecord) -> RevisionRecord:
    """Require a graph_id on vertex and edge frames; plain frames always pass.

    Returns the record unchanged so calls can be chained.
    """
    if (record.is_vertex_frame or record.is_edge_frame) and not is_graph_owned(record):
        raise InvalidRecordError(
            InvariantCode.MISSING_GRAPH_ID,
            f"graph_id is required for vertex and edge frames ({record.debug_summary()})",
            "graph_id",
        )
    return record
