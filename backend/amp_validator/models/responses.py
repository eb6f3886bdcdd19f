"""API response models."""

from pydantic import BaseModel, Field
from typing import Optional, Literal


class ValidationErrorResponse(BaseModel):
    """A single finding with its engine-rendered message."""

    severity: Optional[str] = None
    code: Optional[str] = None
    params: list[str] = []
    line: Optional[int] = None
    col: Optional[int] = None
    spec_url: Optional[str] = Field(default=None, serialization_alias="specUrl")
    message: str


class ValidateResponse(BaseModel):
    """Validation outcome for one document."""

    status: Optional[str] = None
    format: str
    errors: list[ValidationErrorResponse] = []


class RenderInlineResponse(BaseModel):
    """Document annotated with inline error markers."""

    status: Optional[str] = None
    filename: str
    annotated: str


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    engine: Literal["uninitialized", "ready"]
