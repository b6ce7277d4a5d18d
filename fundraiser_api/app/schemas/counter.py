"""
Pydantic schemas for the counter, pot and verification payloads.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CountPayload(BaseModel):
    """Body of the ``lap`` and ``lapsdone`` routes."""

    count: Optional[Any] = Field(None, description="Number of lengths; 1 when omitted for add/remove")


class CagnottePayload(BaseModel):
    amount: Optional[Any] = Field(None, description="New total of the pot")


class StateUpdate(BaseModel):
    """Schema for setting several counters at once.

    All fields are optional; only provided values will be updated.
    """

    lapCount: Optional[Any] = None
    cagnotte: Optional[Any] = None


class VerifyPayload(BaseModel):
    token: Optional[Any] = Field(None, description="Admin token to check")
