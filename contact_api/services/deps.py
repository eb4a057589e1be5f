from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from contact_api.config import get_settings
from contact_api.database.models import FeedbackItem, Submission
from contact_api.database.repository import Repository
from contact_api.database.session import get_db
from contact_api.services.submission_service import SubmissionService


def get_submission_service(db: Session = Depends(get_db)) -> SubmissionService:
    return SubmissionService(
        Repository(db, Submission),
        Repository(db, FeedbackItem),
        recent_limit=get_settings().recent_contacts_limit,
    )
