"""Schemas shared across endpoints."""

from typing import Optional
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    profile: str = Field(..., description="Active configuration profile")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0",
                    "profile": "development"
                }
            ]
        }
    }


class ErrorBody(BaseModel):
    """Error details returned to clients."""
    
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    retryable: bool = Field(False, description="Whether retrying may succeed")
    details: Optional[list[dict]] = Field(None, description="Field-level decode problems")


class ErrorResponse(BaseModel):
    """Envelope for every error response."""
    
    error: ErrorBody
