"""Data contracts for the severance (rescisão) calculation."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from futuro_financeiro.core.constants import MINIMUM_WAGE


class TerminationType(str, Enum):
    NO_CAUSE = "sem-justa-causa"
    RESIGNATION = "demissao"
    JUST_CAUSE = "justa-causa"
    AGREEMENT = "acordo"

    @property
    def label(self) -> str:
        return TERMINATION_LABELS[self]


TERMINATION_LABELS = {
    TerminationType.NO_CAUSE: "Demissão sem justa causa",
    TerminationType.RESIGNATION: "Pedido de demissão",
    TerminationType.AGREEMENT: "Demissão em comum acordo",
    TerminationType.JUST_CAUSE: "Demissão por justa causa",
}


class SeveranceRequest(BaseModel):
    """Inputs for a severance calculation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    wage: float = Field(..., ge=MINIMUM_WAGE, le=100000, description="Current monthly wage.")
    tenure_months: int = Field(..., ge=0, le=50 * 12 + 11, description="Time with the employer, in months.")
    vacation_days: int = Field(0, ge=0, le=60, description="Vested vacation days not yet taken.")
    termination_type: TerminationType


class SeveranceComponents(BaseModel):
    model_config = ConfigDict(frozen=True)

    notice: float = 0.0
    vacation_due: float = 0.0
    vacation_pro_rata: float = 0.0
    thirteenth_pro_rata: float = 0.0
    fgts_balance: float = 0.0
    fgts_penalty: float = 0.0
    total: float = 0.0


class SeveranceBreakdown(BaseModel):
    """Amounts owed on termination, one field per entitlement."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=lambda: f"resc-{uuid4().hex[:12]}")
    wage: float
    tenure_months: int
    vacation_days: int
    termination_type: TerminationType
    tenure_years: int
    pro_rata_months: int
    notice_days: int
    components: SeveranceComponents
    created_at: datetime = Field(default_factory=datetime.now)
