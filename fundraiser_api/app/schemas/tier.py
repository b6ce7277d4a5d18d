"""
Pydantic schemas for donation tiers and goal tiers.

A donation tier is a challenge unlocked when the pot reaches
``amount``; a goal tier is a bigger milestone.  ``DonationCreate`` and
``GoalCreate`` keep every field optional because the handlers report
missing values themselves with a plain 400 response.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class GoalCreate(BaseModel):
    """Schema for creating a goal tier."""

    amount: Optional[Any] = Field(None, description="Amount that unlocks the tier")
    description: Optional[Any] = Field(None, description="Text shown on the dashboard")
    icon: Optional[Any] = Field(None, description="Short emoji or symbol")


class DonationCreate(GoalCreate):
    """Schema for creating a donation tier."""

    special: Optional[bool] = Field(False, description="Highlight the challenge on the dashboard")


class GoalUpdate(BaseModel):
    """Schema for updating a goal tier.

    All fields are optional; only provided fields will be updated.
    """

    amount: Optional[Any] = None
    description: Optional[Any] = None
    icon: Optional[Any] = None


class DonationUpdate(GoalUpdate):
    special: Optional[bool] = None
