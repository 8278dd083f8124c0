"""Pydantic schemas for API request/response."""

from typing import Optional

from pydantic import BaseModel


class VerifyRequest(BaseModel):
    """Request for verify endpoint."""

    code: Optional[str] = None


class VerifyResponse(BaseModel):
    """Response for verify endpoint."""

    success: bool
    message: Optional[str] = None
