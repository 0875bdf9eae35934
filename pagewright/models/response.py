"""
Response models for pagewright
"""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error kind")
    detail: Optional[str] = Field(None, description="Detailed error information")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "page_not_found",
                "detail": "The page is not enabled : id=3",
            }
        }


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str = Field("healthy", description="Service status")
    framework: str = Field("pagewright", description="Framework name")
    sites: int = Field(0, description="Number of configured sites")
