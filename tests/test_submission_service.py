"""Tests for SubmissionService and the repository it writes through."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from contact_api.database.models import FeedbackItem, Submission
from contact_api.database.repository import Repository
from contact_api.exceptions import StoreError, ValidationError
from contact_api.services.submission_service import (
    CONTACT_RECEIVED_MESSAGE,
    Receipt,
    SubmissionService,
)

from .conftest import VALID_CONTACT


def _broken_session() -> MagicMock:
    db = MagicMock(spec=Session)
    failure = OperationalError("INSERT INTO contacts", {}, Exception("database is locked"))
    db.commit.side_effect = failure
    db.execute.side_effect = failure
    return db


class TestSubmitContact:
    """Tests for SubmissionService.submit_contact."""

    def test_valid_submission_persists_one_normalized_record(self, service: SubmissionService) -> None:
        receipt = service.submit_contact(
            {
                "name": " Jo ",
                "email": " A@B.CO ",
                "subject": " Hi there ",
                "message": " This is a test message ",
            }
        )

        assert isinstance(receipt, Receipt)
        assert receipt.success is True
        assert receipt.message == CONTACT_RECEIVED_MESSAGE
        assert service.count() == 1

        [stored] = service.list_all()
        assert stored.id == receipt.id
        assert stored.name == "Jo"
        assert stored.email == "a@b.co"
        assert stored.subject == "Hi there"
        assert stored.message == "This is a test message"
        assert stored.created_at is not None

    def test_invalid_submission_is_not_persisted(self, service: SubmissionService) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.submit_contact({"name": "J", "email": "bad", "subject": "Hi", "message": "short"})

        assert len(exc_info.value.errors) == 4
        assert service.count() == 0

    def test_one_bad_field_blocks_the_whole_record(self, service: SubmissionService) -> None:
        with pytest.raises(ValidationError):
            service.submit_contact({**VALID_CONTACT, "message": "too short"})

        assert service.list_all() == []

    def test_identical_submissions_are_not_deduplicated(self, service: SubmissionService) -> None:
        first = service.submit_contact(VALID_CONTACT)
        second = service.submit_contact(VALID_CONTACT)

        assert first.id != second.id
        assert service.count() == 2

    def test_count_tracks_successful_submissions_only(self, service: SubmissionService) -> None:
        for _ in range(3):
            service.submit_contact(VALID_CONTACT)
        with pytest.raises(ValidationError):
            service.submit_contact({})

        assert service.count() == 3

    def test_store_failure_raises_store_error(self, feedback: Repository[FeedbackItem]) -> None:
        db = _broken_session()
        service = SubmissionService(Repository(db, Submission), feedback)

        with pytest.raises(StoreError) as exc_info:
            service.submit_contact(VALID_CONTACT)

        assert exc_info.value.operation == "insert"
        assert exc_info.value.collection == "contacts"
        db.rollback.assert_called_once()

    def test_validation_runs_before_store(self, feedback: Repository[FeedbackItem]) -> None:
        db = _broken_session()
        service = SubmissionService(Repository(db, Submission), feedback)

        with pytest.raises(ValidationError):
            service.submit_contact({})

        db.add.assert_not_called()


class TestSubmitFeedback:
    """Tests for SubmissionService.submit_feedback."""

    def test_feedback_is_stored_separately(self, service: SubmissionService, feedback: Repository[FeedbackItem]) -> None:
        receipt = service.submit_feedback({"name": "X", "message": "ok"})

        assert receipt.success is True
        assert feedback.count() == 1
        assert service.count() == 0

    def test_missing_feedback_field(self, service: SubmissionService, feedback: Repository[FeedbackItem]) -> None:
        with pytest.raises(ValidationError):
            service.submit_feedback({"name": "X"})

        assert feedback.count() == 0


class TestListing:
    """Tests for list_recent, list_all and count."""

    def test_list_all_newest_first(self, service: SubmissionService, seed_contacts) -> None:
        rows = seed_contacts(5)

        listed = service.list_all()

        assert [row.id for row in listed] == [row.id for row in reversed(rows)]

    def test_list_recent_caps_at_fifty(self, service: SubmissionService, seed_contacts) -> None:
        rows = seed_contacts(55)

        recent = service.list_recent()

        assert len(recent) == 50
        assert [row.id for row in recent] == [row.id for row in reversed(rows)][:50]

    def test_list_recent_limit_above_cap_is_clamped(self, service: SubmissionService, seed_contacts) -> None:
        seed_contacts(55)

        assert len(service.list_recent(500)) == 50

    def test_list_recent_smaller_limit(self, service: SubmissionService, seed_contacts) -> None:
        rows = seed_contacts(10)

        recent = service.list_recent(3)

        assert [row.id for row in recent] == [rows[9].id, rows[8].id, rows[7].id]

    def test_list_recent_rejects_non_positive_limit(self, service: SubmissionService) -> None:
        with pytest.raises(ValueError):
            service.list_recent(0)

    def test_count_empty(self, service: SubmissionService) -> None:
        assert service.count() == 0
        assert service.list_recent() == []

    def test_read_failure_raises_store_error(self, feedback: Repository[FeedbackItem]) -> None:
        service = SubmissionService(Repository(_broken_session(), Submission), feedback)

        with pytest.raises(StoreError):
            service.list_all()
        with pytest.raises(StoreError):
            service.count()

    def test_recent_limit_must_be_positive(self, contacts, feedback) -> None:
        with pytest.raises(ValueError):
            SubmissionService(contacts, feedback, recent_limit=0)
