# threadspire_api/schemas/common.py

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - camelCase aliases on the wire, snake_case accepted on input too
    - forbid extra fields so clients get early feedback on mistakes
    - ``from_attributes`` so ORM rows can be validated directly
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="forbid",
    )


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorDetail(APIModel):
    """
    Machine- and human-readable error description.
    """

    code: str = Field(
        ...,
        description="Stable, machine-readable error code (e.g. 'not_found').",
    )
    message: str = Field(
        ...,
        description="Human-readable explanation of the error.",
    )
    details: Optional[Mapping[str, Any]] = Field(
        default=None,
        description="Optional structured details (field errors, ids, etc.).",
    )


class ErrorResponse(APIModel):
    """
    Standard error envelope for all endpoints.
    """

    error: ErrorDetail


__all__ = [
    "APIModel",
    "ErrorDetail",
    "ErrorResponse",
]
