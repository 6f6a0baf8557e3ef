"""INSS retirement estimate under the age-based transition rule."""

import logging
from datetime import date
from typing import Optional

from futuro_financeiro.core.constants import (
    BASE_BENEFIT_FACTOR,
    BENEFIT_CEILING,
    EXTRA_PERCENT_PER_YEAR,
    MIN_CONTRIBUTION_YEARS,
    MIN_RETIREMENT_AGE_FEMALE,
    MIN_RETIREMENT_AGE_MALE,
    RETIREMENT_RULE,
)
from futuro_financeiro.schemas.retirement import Gender, PersonProfile, RetirementEstimate

logger = logging.getLogger(__name__)


def minimum_retirement_age(gender: Gender) -> int:
    if gender == Gender.FEMALE:
        return MIN_RETIREMENT_AGE_FEMALE
    return MIN_RETIREMENT_AGE_MALE


def benefit_percentage(contribution_years: int) -> float:
    """60% of the wage plus 2% per year beyond the minimum, capped at 100%."""
    extra_years = max(0, contribution_years - MIN_CONTRIBUTION_YEARS)
    return min(BASE_BENEFIT_FACTOR + extra_years * EXTRA_PERCENT_PER_YEAR, 1.0)


def add_years(start: date, years: int) -> date:
    try:
        return start.replace(year=start.year + years)
    except ValueError:
        # 29 February in a non-leap target year
        return start.replace(year=start.year + years, day=28)


def estimate_retirement(profile: PersonProfile, today: Optional[date] = None) -> RetirementEstimate:
    """
    Estimate when the person can retire and the monthly benefit.

    Remaining time is the larger of the gap to the minimum age and the gap to
    the minimum contribution time. The benefit assumes the person keeps
    contributing until the contribution gap is closed.
    """
    today = today or date.today()

    years_to_age = max(0, minimum_retirement_age(profile.gender) - profile.age)
    years_to_contribution = max(0, MIN_CONTRIBUTION_YEARS - profile.contribution_years)
    remaining = max(years_to_age, years_to_contribution)

    capped_wage = min(profile.average_wage, BENEFIT_CEILING)
    percentage = benefit_percentage(profile.contribution_years + years_to_contribution)
    benefit = capped_wage * percentage

    logger.debug(
        "Retirement estimate: age=%s contribution=%s remaining=%s pct=%.2f",
        profile.age,
        profile.contribution_years,
        remaining,
        percentage,
    )

    return RetirementEstimate(
        profile=profile,
        remaining_years=remaining,
        estimated_benefit=benefit,
        benefit_percentage=percentage,
        capped_wage=capped_wage,
        retirement_date=add_years(today, remaining),
        retirement_age=profile.age + remaining,
        rule=RETIREMENT_RULE,
    )
