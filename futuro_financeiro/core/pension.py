"""Private pension projection with monthly compounding."""

import logging
from typing import List

from futuro_financeiro.schemas.pension import PensionProjection, PensionRequest, ProjectionEntry

logger = logging.getLogger(__name__)


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def future_value(contribution: float, rate: float, months: int) -> float:
    """
    Future value of an ordinary annuity: PMT * ((1 + r)^n - 1) / r.

    With a zero rate the formula degenerates, so the limit (plain sum of the
    contributions) is returned instead.
    """
    if rate == 0:
        return contribution * months
    return contribution * (((1 + rate) ** months - 1) / rate)


def project_pension(request: PensionRequest) -> PensionProjection:
    """Compute the final balance and one projection entry per contribution year."""
    rate = monthly_rate(request.annual_rate)
    months = request.years * 12
    final_balance = future_value(request.monthly_contribution, rate, months)

    # each year is recomputed from the closed form, not accumulated
    projection: List[ProjectionEntry] = []
    for year in range(1, request.years + 1):
        elapsed = year * 12
        balance = future_value(request.monthly_contribution, rate, elapsed)
        contributed = request.monthly_contribution * elapsed
        projection.append(
            ProjectionEntry(
                age=request.current_age + year,
                balance=balance,
                cumulative_contribution=contributed,
                cumulative_yield=balance - contributed,
            )
        )

    total_contributed = request.monthly_contribution * months
    logger.debug(
        "Pension projection: %s/month for %s years at %s%% -> %.2f",
        request.monthly_contribution,
        request.years,
        request.annual_rate,
        final_balance,
    )

    return PensionProjection(
        monthly_contribution=request.monthly_contribution,
        years=request.years,
        annual_rate=request.annual_rate,
        current_age=request.current_age,
        final_balance=final_balance,
        total_contributed=total_contributed,
        total_yield=final_balance - total_contributed,
        projection=projection,
    )
