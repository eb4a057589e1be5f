from contact_api.schemas.contact import ContactCount, ContactCreate, ContactReceipt, SubmissionRead
from contact_api.schemas.feedback import FeedbackCreate, FeedbackReceipt

__all__ = [
    "ContactCount",
    "ContactCreate",
    "ContactReceipt",
    "SubmissionRead",
    "FeedbackCreate",
    "FeedbackReceipt",
]
