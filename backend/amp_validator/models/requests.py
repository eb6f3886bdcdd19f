"""API request models."""

from pydantic import BaseModel, Field
from typing import Optional


class ValidateRequest(BaseModel):
    """Request to validate a document."""

    html: str = Field(..., description="Document source to validate")
    format: Optional[str] = Field(
        default=None,
        description="Validation format (AMP, AMP4ADS, AMP4EMAIL, ...); defaults to AMP",
        examples=["AMP4EMAIL"],
    )


class RenderInlineRequest(ValidateRequest):
    """Request to validate a document and return it with inline error markers."""

    filename: str = Field(default="document.html", description="Name used in rendered messages")
