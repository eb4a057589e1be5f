from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContactCreate(BaseModel):
    # Field rules live in services.validation so that every failure is
    # reported in one response; here we only require a JSON object.
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    subject: Any = None
    message: Any = None


class SubmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime = Field(alias="createdAt")


class ContactReceipt(BaseModel):
    success: bool = True
    message: str
    id: str


class ContactCount(BaseModel):
    count: int
