from __future__ import annotations

from fastapi import APIRouter, Depends, status

from contact_api.schemas.contact import ContactCreate, ContactReceipt, SubmissionRead
from contact_api.services.deps import get_submission_service
from contact_api.services.submission_service import SubmissionService


router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", status_code=status.HTTP_201_CREATED, response_model=ContactReceipt)
def submit_contact(
    payload: ContactCreate,
    service: SubmissionService = Depends(get_submission_service),
) -> ContactReceipt:
    receipt = service.submit_contact(payload.model_dump())
    return ContactReceipt(success=receipt.success, message=receipt.message, id=receipt.id)


@router.get("/contacts", response_model=list[SubmissionRead])
def recent_contacts(service: SubmissionService = Depends(get_submission_service)) -> list[SubmissionRead]:
    return [SubmissionRead.model_validate(row) for row in service.list_recent()]
