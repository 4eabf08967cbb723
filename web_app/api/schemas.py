"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional


class ShortenRequest(BaseModel):
    """Request to shorten a URL (JSON or form body)."""

    url: Optional[str] = Field(None, description="The URL to shorten")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {"url": "https://www.freecodecamp.org"}
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    original_url: str = Field(..., description="The submitted URL, unchanged")
    short_url: int = Field(..., description="The numeric short code")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "original_url": "https://www.freecodecamp.org",
                    "short_url": 1
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
