"""Data contracts for the private pension projection."""

from datetime import datetime
from typing import List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class PensionRequest(BaseModel):
    """Inputs required to project a private pension plan."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    monthly_contribution: float = Field(..., ge=50, le=50000, description="Amount invested every month.")
    years: int = Field(..., ge=1, le=50, description="Number of years contributing.")
    annual_rate: float = Field(
        ...,
        ge=0.1,
        le=30,
        description="Annual return expressed in percent (e.g. 8 for 8%).",
    )
    current_age: int = Field(30, ge=18, le=70)


class ProjectionEntry(BaseModel):
    """Balance at the end of one contribution year."""

    model_config = ConfigDict(frozen=True)

    age: int
    balance: float
    cumulative_contribution: float
    cumulative_yield: float


class PensionProjection(BaseModel):
    """Projected accumulation for a private pension plan."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=lambda: f"prev-{uuid4().hex[:12]}")
    monthly_contribution: float
    years: int
    annual_rate: float
    current_age: int
    final_balance: float
    total_contributed: float
    total_yield: float
    projection: List[ProjectionEntry]
    created_at: datetime = Field(default_factory=datetime.now)
