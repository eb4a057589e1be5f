"""Field rules for contact and feedback submissions.

Everything here is pure: values go in, a normalized record or a
:class:`~contact_api.exceptions.ValidationError` comes out. Every field is
checked so the caller sees all failures at once.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from contact_api.exceptions import ValidationError


# Loose heuristic, not RFC 5322: accepts some invalid addresses and rejects
# some valid ones (e.g. "+" tags, TLDs longer than three letters).
# Same language as ^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$ without the
# nested optional separator, which backtracks exponentially on near misses.
EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+$", re.ASCII)

NAME_MIN_LENGTH = 2
SUBJECT_MIN_LENGTH = 3
MESSAGE_MIN_LENGTH = 10

_LABELS = {
    "name": "Name",
    "email": "Email",
    "subject": "Subject",
    "message": "Message",
}


@dataclass(frozen=True)
class ContactFields:
    name: str
    email: str
    subject: str
    message: str


@dataclass(frozen=True)
class FeedbackFields:
    name: str
    message: str


def _label(field: str) -> str:
    return _LABELS.get(field, field.capitalize())


def _required_text(raw: Mapping[str, Any], field: str, errors: dict[str, str]) -> str | None:
    value = raw.get(field)
    if value is None:
        errors[field] = f"{_label(field)} is required."
        return None
    if not isinstance(value, str):
        errors[field] = f"{_label(field)} must be text."
        return None
    value = value.strip()
    if not value:
        errors[field] = f"{_label(field)} is required."
        return None
    return value


def _min_length(value: str | None, field: str, minimum: int, errors: dict[str, str]) -> None:
    if value is not None and len(value) < minimum:
        errors[field] = f"{_label(field)} must be at least {minimum} characters."


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.match(value) is not None


def validate_contact(raw: Mapping[str, Any]) -> ContactFields:
    errors: dict[str, str] = {}

    name = _required_text(raw, "name", errors)
    email = _required_text(raw, "email", errors)
    subject = _required_text(raw, "subject", errors)
    message = _required_text(raw, "message", errors)

    _min_length(name, "name", NAME_MIN_LENGTH, errors)
    if email is not None and not is_valid_email(email):
        errors["email"] = "Please provide a valid email address."
    _min_length(subject, "subject", SUBJECT_MIN_LENGTH, errors)
    _min_length(message, "message", MESSAGE_MIN_LENGTH, errors)

    if errors:
        raise ValidationError(errors)

    return ContactFields(name=name, email=email.lower(), subject=subject, message=message)


def validate_feedback(raw: Mapping[str, Any]) -> FeedbackFields:
    errors: dict[str, str] = {}

    name = _required_text(raw, "name", errors)
    message = _required_text(raw, "message", errors)

    if errors:
        raise ValidationError(errors, message="All fields are required.")

    return FeedbackFields(name=name, message=message)
