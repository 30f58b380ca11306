"""Tests for lifecycle status transitions."""

import logging
from datetime import datetime, timezone

import pytest

from framerev.errors import IllegalTransitionError
from framerev.kernel.lifecycle import (
    ALLOWED_TRANSITIONS,
    can_transition,
    delete_final,
    soft_delete,
    transition,
    undelete,
)
from framerev.kernel.record import RevisionRecord
from framerev.kernel.status import Status


@pytest.mark.parametrize(
    "current, target",
    [
        (Status.ACTIVE, Status.DELETED),
        (Status.DELETED, Status.ACTIVE),
        (Status.DELETED, Status.DELETE_FINAL),
        (Status.ACTIVE, Status.DELETE_FINAL),
    ],
)
def test_allowed_transitions(current, target):
    assert can_transition(current, target)


@pytest.mark.parametrize("target", list(Status))
def test_delete_final_is_terminal(target):
    assert not can_transition(Status.DELETE_FINAL, target)


def test_self_transitions_not_allowed():
    for status in Status:
        assert status not in ALLOWED_TRANSITIONS[status]


def test_soft_delete_and_undelete(sales_frame):
    deleted = soft_delete(sales_frame, modified_by=4)
    assert deleted.is_status(Status.DELETED)
    assert deleted.modified_by == 4
    assert deleted.modified_on > sales_frame.modified_on
    assert sales_frame.is_status(Status.ACTIVE)

    restored = undelete(deleted)
    assert restored.is_status(Status.ACTIVE)
    assert restored.id == sales_frame.id


def test_hard_delete_cannot_be_undone(sales_frame):
    gone = delete_final(soft_delete(sales_frame))
    assert gone.is_status(Status.DELETE_FINAL)
    with pytest.raises(IllegalTransitionError, match="DELETE_FINAL -> ACTIVE"):
        undelete(gone)


def test_transition_uses_given_timestamp():
    record = RevisionRecord(id=1)
    when = datetime(2030, 5, 1, tzinfo=timezone.utc)
    assert transition(record, Status.DELETED, now=when).modified_on == when


def test_illegal_transition_carries_states():
    record = RevisionRecord(id=1, status=Status.ACTIVE)
    with pytest.raises(IllegalTransitionError) as exc_info:
        transition(record, Status.ACTIVE)
    assert exc_info.value.current == Status.ACTIVE
    assert exc_info.value.target == Status.ACTIVE


def test_transition_logged(sales_frame, caplog):
    with caplog.at_level(logging.INFO, logger="framerev"):
        soft_delete(sales_frame)
    assert any("ACTIVE -> DELETED" in message for message in caplog.messages)


def test_transition_gates_on_is_status(monkeypatch):
    """The current state is read through the record's is_status predicate."""
    asked = []
    original = RevisionRecord.is_status

    def spy(self, status):
        asked.append(status)
        return original(self, status)

    monkeypatch.setattr(RevisionRecord, "is_status", spy)
    transition(RevisionRecord(id=1, status=Status.DELETED), Status.ACTIVE)
    assert Status.DELETED in asked
