from __future__ import annotations

from fastapi import APIRouter, Depends

from contact_api.schemas.contact import ContactCount, SubmissionRead
from contact_api.services.deps import get_submission_service
from contact_api.services.submission_service import SubmissionService


# No access control yet: these routes are open to anyone who can reach the API.
router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/contacts", response_model=list[SubmissionRead])
def all_contacts(service: SubmissionService = Depends(get_submission_service)) -> list[SubmissionRead]:
    return [SubmissionRead.model_validate(row) for row in service.list_all()]


@router.get("/contact-count", response_model=ContactCount)
def contact_count(service: SubmissionService = Depends(get_submission_service)) -> ContactCount:
    return ContactCount(count=service.count())
