"""Data contracts for the INSS retirement estimate."""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from futuro_financeiro.core.constants import MINIMUM_WAGE


class Gender(str, Enum):
    MALE = "masculino"
    FEMALE = "feminino"


class PersonProfile(BaseModel):
    """Inputs for the retirement estimate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Optional[str] = Field(None, min_length=2, description="Display name, echoed in reports.")
    age: int = Field(..., ge=16, le=80)
    contribution_years: int = Field(..., ge=0, le=50, description="Years already contributed to INSS.")
    average_wage: float = Field(
        ...,
        ge=MINIMUM_WAGE,
        le=50000,
        description="Average contribution wage, at least the minimum wage.",
    )
    gender: Gender = Gender.MALE


class RetirementEstimate(BaseModel):
    """Estimated INSS benefit for a profile."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=lambda: f"inss-{uuid4().hex[:12]}")
    profile: PersonProfile
    remaining_years: int = Field(..., ge=0)
    estimated_benefit: float = Field(..., ge=0)
    benefit_percentage: float = Field(..., ge=0, le=1)
    capped_wage: float = Field(..., ge=0)
    retirement_date: date
    retirement_age: int
    rule: str
    created_at: datetime = Field(default_factory=datetime.now)
