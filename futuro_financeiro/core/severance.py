"""Severance (rescisão trabalhista) breakdown by termination type."""

import logging

from futuro_financeiro.core.constants import (
    AGREEMENT_FGTS_PENALTY,
    AGREEMENT_FGTS_WITHDRAWAL,
    DAYS_PER_MONTH,
    FGTS_PENALTY_RATE,
    FGTS_RATE,
    NOTICE_BASE_DAYS,
    NOTICE_EXTRA_DAYS_PER_YEAR,
    NOTICE_MAX_DAYS,
    VACATION_BONUS,
)
from futuro_financeiro.schemas.severance import (
    SeveranceBreakdown,
    SeveranceComponents,
    SeveranceRequest,
    TerminationType,
)

logger = logging.getLogger(__name__)


def notice_days(tenure_years: int) -> int:
    """30 days plus 3 per full year worked, up to 90."""
    return min(NOTICE_BASE_DAYS + tenure_years * NOTICE_EXTRA_DAYS_PER_YEAR, NOTICE_MAX_DAYS)


def vacation_base(wage: float) -> float:
    """Monthly wage plus the constitutional one-third vacation bonus."""
    return wage + wage * VACATION_BONUS


def calculate_severance(request: SeveranceRequest) -> SeveranceBreakdown:
    """
    Break down what the employee receives on termination.

    Vested vacation is paid for every termination type. Pro-rata amounts use
    the months of tenure that do not make up a full year.
    """
    wage = request.wage
    tenure_years = request.tenure_months // 12
    pro_rata_months = request.tenure_months % 12
    daily_wage = wage / DAYS_PER_MONTH
    pro_rata_fraction = pro_rata_months / 12

    amounts = {
        "notice": 0.0,
        "vacation_due": 0.0,
        "vacation_pro_rata": 0.0,
        "thirteenth_pro_rata": 0.0,
        "fgts_balance": 0.0,
        "fgts_penalty": 0.0,
    }
    days = 0

    if request.vacation_days > 0:
        amounts["vacation_due"] = vacation_base(wage) * (request.vacation_days / DAYS_PER_MONTH)

    termination = request.termination_type
    fgts_deposits = wage * request.tenure_months * FGTS_RATE

    if termination in (TerminationType.NO_CAUSE, TerminationType.AGREEMENT):
        days = notice_days(tenure_years)
        amounts["notice"] = daily_wage * days

    if termination in (TerminationType.NO_CAUSE, TerminationType.RESIGNATION, TerminationType.AGREEMENT):
        amounts["vacation_pro_rata"] = vacation_base(wage) * pro_rata_fraction
        amounts["thirteenth_pro_rata"] = wage * pro_rata_fraction

    if termination == TerminationType.NO_CAUSE:
        amounts["fgts_balance"] = fgts_deposits
        amounts["fgts_penalty"] = fgts_deposits * FGTS_PENALTY_RATE
    elif termination == TerminationType.AGREEMENT:
        # half notice, 80% of the FGTS released and a 20% penalty
        amounts["notice"] /= 2
        amounts["fgts_balance"] = fgts_deposits * AGREEMENT_FGTS_WITHDRAWAL
        amounts["fgts_penalty"] = fgts_deposits * AGREEMENT_FGTS_PENALTY

    components = SeveranceComponents(**amounts, total=sum(amounts.values()))
    logger.debug(
        "Severance %s: wage=%s months=%s total=%.2f",
        termination.value,
        wage,
        request.tenure_months,
        components.total,
    )

    return SeveranceBreakdown(
        wage=wage,
        tenure_months=request.tenure_months,
        vacation_days=request.vacation_days,
        termination_type=termination,
        tenure_years=tenure_years,
        pro_rata_months=pro_rata_months,
        notice_days=days,
        components=components,
    )
