"""
Pydantic models for API responses
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProcessReceiptResponse(BaseModel):
    """Identifier issued for a processed receipt"""
    model_config = ConfigDict(
        json_schema_extra={"example": {"id": "7fb1377b-b223-49d9-a31a-5a02701dd310"}}
    )

    id: str = Field(..., description="Opaque receipt identifier")


class PointsResponse(BaseModel):
    """Points awarded to a receipt"""
    model_config = ConfigDict(json_schema_extra={"example": {"points": 28}})

    points: int = Field(..., ge=0, description="Awarded points")


class ErrorResponse(BaseModel):
    """Error body"""
    description: str = Field(..., description="What went wrong")
    error: Optional[str] = Field(None, description="Validation error kind")
    field: Optional[str] = Field(None, description="Offending receipt field")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    receipts_stored: int = Field(..., ge=0, description="Number of stored receipts")
