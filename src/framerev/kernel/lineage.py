"""Walking a revision's parent chain.

Records hold their parent as an id only. Collaborators that can look up
records by id pass a ``resolve`` callable and get the chain back.
"""

from typing import Callable, Iterator, List, Optional

from framerev.errors import LineageCycleError
from framerev.kernel.record import RevisionRecord

Resolver = Callable[[int], Optional[RevisionRecord]]


def iter_ancestors(record: RevisionRecord, resolve: Resolver) -> Iterator[RevisionRecord]:
    """Yield parent, grandparent, ... of ``record``, nearest first.

    Stops at a revision without a parent, or when a parent id cannot be
    resolved (the store may have purged it).

    Raises:
        LineageCycleError: if an id is visited twice
    """
    path = [record.id]
    seen = {record.id}
    current = record
    while current.parent is not None:
        parent_id = current.parent
        if parent_id in seen:
            cycle_start = path.index(parent_id)
            raise LineageCycleError(path[cycle_start:] + [parent_id])
        parent = resolve(parent_id)
        if parent is None:
            return
        seen.add(parent_id)
        path.append(parent_id)
        yield parent
        current = parent


def lineage_ids(record: RevisionRecord, resolve: Resolver) -> List[int]:
    """Ids from ``record`` back to the oldest reachable revision."""
    return [record.id] + [r.id for r in iter_ancestors(record, resolve)]


def root_of(record: RevisionRecord, resolve: Resolver) -> RevisionRecord:
    """The oldest reachable revision (``record`` itself when it has no parent)."""
    root = record
    for ancestor in iter_ancestors(record, resolve):
        root = ancestor
    return root
