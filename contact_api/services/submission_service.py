from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from contact_api.database.models import FeedbackItem, Submission
from contact_api.database.repository import Repository
from contact_api.services.validation import validate_contact, validate_feedback
from contact_api.utils.logging import logger


DEFAULT_RECENT_LIMIT = 50
CONTACT_RECEIVED_MESSAGE = "Your message has been sent successfully."
FEEDBACK_RECEIVED_MESSAGE = "Thank you for your feedback!"


@dataclass(frozen=True)
class Receipt:
    id: str
    message: str
    success: bool = True


class SubmissionService:
    """Validates, stores and reads back contact submissions and feedback."""

    def __init__(
        self,
        contacts: Repository[Submission],
        feedback: Repository[FeedbackItem],
        *,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ) -> None:
        if recent_limit < 1:
            raise ValueError("recent_limit must be at least 1.")
        self.contacts = contacts
        self.feedback = feedback
        self.recent_limit = recent_limit

    def submit_contact(self, raw: Mapping[str, Any]) -> Receipt:
        fields = validate_contact(raw)
        record = Submission(
            name=fields.name,
            email=fields.email,
            subject=fields.subject,
            message=fields.message,
        )
        record_id = self.contacts.insert(record)
        logger.info("Stored contact submission %s", record_id)
        return Receipt(id=record_id, message=CONTACT_RECEIVED_MESSAGE)

    def submit_feedback(self, raw: Mapping[str, Any]) -> Receipt:
        fields = validate_feedback(raw)
        record_id = self.feedback.insert(FeedbackItem(name=fields.name, message=fields.message))
        logger.info("Stored feedback item %s", record_id)
        return Receipt(id=record_id, message=FEEDBACK_RECEIVED_MESSAGE)

    def list_recent(self, limit: int | None = None) -> list[Submission]:
        if limit is None:
            limit = self.recent_limit
        if limit < 1:
            raise ValueError("limit must be at least 1.")
        return self.contacts.find(newest_first=True, limit=min(limit, self.recent_limit))

    def list_all(self) -> list[Submission]:
        return self.contacts.find(newest_first=True)

    def count(self) -> int:
        return self.contacts.count()
