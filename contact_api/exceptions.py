"""Error taxonomy for the contact intake service.

Handlers in :mod:`contact_api.errors` translate each of these into an HTTP
response; route handlers raise them and never build error responses
themselves.
"""

from __future__ import annotations

from collections.abc import Mapping


class ContactApiError(Exception):
    """Base exception for all contact intake errors."""


class ValidationError(ContactApiError):
    """One or more submitted fields failed their rules.

    Attributes:
        errors: Mapping of field name to a human-readable reason.
    """

    def __init__(self, errors: Mapping[str, str], message: str = "Validation failed.") -> None:
        self.errors = dict(errors)
        self.message = message
        super().__init__(f"{message} ({', '.join(self.errors)})")


class StoreError(ContactApiError):
    """The record store could not complete an insert or read."""

    def __init__(self, operation: str, collection: str, *, cause: Exception | None = None) -> None:
        self.operation = operation
        self.collection = collection
        self.cause = cause
        detail = f"{operation} on {collection!r} failed"
        if cause is not None:
            detail = f"{detail}: {type(cause).__name__}"
        super().__init__(detail)


class MalformedRequestError(ContactApiError):
    """The request body was missing or could not be decoded into an object."""

    def __init__(self, message: str = "Malformed request body.") -> None:
        self.message = message
        super().__init__(message)
