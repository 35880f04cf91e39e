"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: DesignRequest is the JSON body of POST /designs. It accepts the
camelCase keys the web app already sends (aspirationId, createdAt) through
field aliases. Every failure answers with ErrorResponse ({"error": ...}).

RULES:
- All models use Field(description=...) for OpenAPI documentation
- aspirationId and content are both optional at the schema level; the
  endpoint raises MissingInputError when neither is present, so the client
  gets the structured error payload instead of a 422 validation body
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class DesignRequest(BaseModel):
    """Body of a card rendering request.

    RULES:
    - aspirationId takes precedence over content when both are sent
    - createdAt overrides the stored timestamp (decorations only)
    - preset/style default to the configured service defaults
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"aspirationId": "7f3c1d9e-2b4a-4c1e-9a51-0c6f2b1d8e42"},
                {"content": "Semoga kantin sekolah menyediakan makanan sehat.", "style": "minimal"},
            ]
        },
    )

    aspiration_id: Optional[str] = Field(
        default=None,
        alias="aspirationId",
        description="Id of a stored aspiration to render.",
    )
    content: Optional[str] = Field(
        default=None,
        description="Aspiration text to render directly (used when no id is sent).",
    )
    created_at: Optional[datetime] = Field(
        default=None,
        alias="createdAt",
        description="Creation timestamp shown by styles with a date footer.",
    )
    preset: Optional[str] = Field(
        default=None,
        description="Canvas preset: square, compact or instagram.",
    )
    style: Optional[str] = Field(
        default=None,
        description="Decoration style: ngl, minimal or gradient.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - error is always a human-readable error message
    """

    error: str = Field(description="Human-readable error description.")


class PresetInfo(BaseModel):
    """Description of an available canvas preset."""

    key: str = Field(description="Preset identifier used in requests.")
    canvas_size: int = Field(description="Width and height of the SVG canvas.")
    max_lines: int = Field(description="Maximum number of rendered text lines.")


class StyleInfo(BaseModel):
    """Description of an available decoration style."""

    key: str = Field(description="Style identifier used in requests.")
    name: str = Field(description="Human-readable style name.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
