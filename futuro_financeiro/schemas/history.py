"""Data contracts for the recent-simulations history."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from futuro_financeiro.schemas.pension import PensionProjection
from futuro_financeiro.schemas.retirement import RetirementEstimate
from futuro_financeiro.schemas.severance import SeveranceBreakdown


class HistoryKind(str, Enum):
    INSS = "inss"
    PENSION = "previdencia"
    SEVERANCE = "rescisao"


class SimulationHistory(BaseModel):
    """Newest-first lists of stored results, one per calculator."""

    inss: List[RetirementEstimate] = Field(default_factory=list)
    previdencia: List[PensionProjection] = Field(default_factory=list)
    rescisao: List[SeveranceBreakdown] = Field(default_factory=list)


class HistoryStats(BaseModel):
    total: int = Field(..., ge=0)
    last_created_at: Optional[datetime] = None
