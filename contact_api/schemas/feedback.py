from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class FeedbackCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    message: Any = None


class FeedbackReceipt(BaseModel):
    success: bool = True
    id: str
