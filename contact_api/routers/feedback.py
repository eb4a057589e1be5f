from __future__ import annotations

from fastapi import APIRouter, Depends, status

from contact_api.schemas.feedback import FeedbackCreate, FeedbackReceipt
from contact_api.services.deps import get_submission_service
from contact_api.services.submission_service import SubmissionService


router = APIRouter(prefix="/api/feedback", tags=["feedback"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FeedbackReceipt)
def submit_feedback(
    payload: FeedbackCreate,
    service: SubmissionService = Depends(get_submission_service),
) -> FeedbackReceipt:
    receipt = service.submit_feedback(payload.model_dump())
    return FeedbackReceipt(success=receipt.success, id=receipt.id)
