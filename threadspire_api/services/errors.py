# threadspire_api/services/errors.py

from __future__ import annotations

from typing import Any, Mapping, Optional


class ThreadspireError(Exception):
    """
    Base class for domain errors raised by the service layer.

    ``code`` is a stable, machine-readable identifier copied into the HTTP
    error envelope; ``details`` carries optional structured context.
    """

    code: str = "error"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else None


class NotFoundError(ThreadspireError):
    """Raised when a referenced user/thread/post/collection does not exist."""

    code = "not_found"

    def __init__(self, resource: str, resource_id: Any) -> None:
        super().__init__(
            f"{resource} with id={resource_id} not found.",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(ThreadspireError):
    """Raised when a write would violate a uniqueness rule."""

    code = "conflict"


class AuthenticationError(ThreadspireError):
    """Raised for bad credentials or an invalid / expired bearer token."""

    code = "authentication_failed"


__all__ = [
    "ThreadspireError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
]
