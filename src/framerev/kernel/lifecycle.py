"""Lifecycle transitions for revision records.

Records only expose their status; the transition table lives here so the
record itself stays a passive value.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, FrozenSet, Optional

from framerev.errors import IllegalTransitionError
from framerev.kernel.record import RevisionRecord
from framerev.kernel.status import Status

logger = logging.getLogger(__name__)

# DELETE_FINAL is terminal
ALLOWED_TRANSITIONS: Dict[Status, FrozenSet[Status]] = {
    Status.ACTIVE: frozenset({Status.DELETED, Status.DELETE_FINAL}),
    Status.DELETED: frozenset({Status.ACTIVE, Status.DELETE_FINAL}),
    Status.DELETE_FINAL: frozenset(),
}


def can_transition(current: Status, target: Status) -> bool:
    """Check whether ``current -> target`` is a legal status change."""
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def transition(
    record: RevisionRecord,
    target: Status,
    modified_by: Optional[int] = None,
    now: Optional[datetime] = None,
) -> RevisionRecord:
    """Return a copy of ``record`` moved to ``target``.

    Args:
        record: the revision to transition
        target: the new status
        modified_by: user making the change
        now: modification timestamp (defaults to the current UTC time)

    Returns:
        New record with status, modified_on and modified_by updated

    Raises:
        IllegalTransitionError: if the table does not allow the change
    """
    current = next(s for s in ALLOWED_TRANSITIONS if record.is_status(s))
    if not can_transition(current, target):
        raise IllegalTransitionError(current, target)

    updated = record.with_overrides(
        status=target,
        modified_on=now or datetime.now(timezone.utc),
        modified_by=modified_by,
    )
    logger.info("Status %s -> %s for %s", current.name, target.name, record.debug_summary())
    return updated


def soft_delete(record: RevisionRecord, modified_by: Optional[int] = None) -> RevisionRecord:
    return transition(record, Status.DELETED, modified_by)


def undelete(record: RevisionRecord, modified_by: Optional[int] = None) -> RevisionRecord:
    return transition(record, Status.ACTIVE, modified_by)


def delete_final(record: RevisionRecord, modified_by: Optional[int] = None) -> RevisionRecord:
    """Hard delete; there is no way back from DELETE_FINAL."""
    return transition(record, Status.DELETE_FINAL, modified_by)
