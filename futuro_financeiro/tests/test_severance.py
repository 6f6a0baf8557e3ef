from __future__ import annotations

from math import isclose

import pytest

from futuro_financeiro.core.severance import calculate_severance, notice_days
from futuro_financeiro.schemas.severance import SeveranceRequest, TerminationType


def run(termination: TerminationType, wage: float = 3500.0, months: int = 30, vacation_days: int = 0):
    return calculate_severance(
        SeveranceRequest(
            wage=wage,
            tenure_months=months,
            vacation_days=vacation_days,
            termination_type=termination,
        )
    )


def component_sum(components) -> float:
    return sum(value for name, value in components.model_dump().items() if name != "total")


def test_no_cause_dismissal_scenario():
    result = run(TerminationType.NO_CAUSE)
    components = result.components

    fgts = 3500 * 30 * 0.08
    assert result.tenure_years == 2
    assert result.pro_rata_months == 6
    assert result.notice_days == 36
    assert isclose(components.notice, 3500 / 30 * 36)
    assert components.vacation_due == 0
    assert isclose(components.vacation_pro_rata, (3500 + 3500 / 3) * 0.5)
    assert isclose(components.thirteenth_pro_rata, 3500 * 0.5)
    assert isclose(components.fgts_balance, fgts)
    assert isclose(components.fgts_penalty, fgts * 0.4)
    assert isclose(
        components.total,
        3500 / 30 * 36 + (3500 + 3500 / 3) * 0.5 + 3500 * 0.5 + fgts + fgts * 0.4,
    )


def test_resignation_keeps_only_pro_rata_amounts():
    components = run(TerminationType.RESIGNATION).components

    assert components.notice == 0
    assert components.fgts_balance == 0
    assert components.fgts_penalty == 0
    assert isclose(components.vacation_pro_rata, (3500 + 3500 / 3) * 0.5)
    assert isclose(components.thirteenth_pro_rata, 1750.0)


def test_just_cause_without_vacation_pays_nothing():
    result = run(TerminationType.JUST_CAUSE)

    assert result.components.total == 0
    assert result.notice_days == 0


def test_just_cause_still_pays_vested_vacation():
    components = run(TerminationType.JUST_CAUSE, vacation_days=15).components

    expected = (3500 + 3500 / 3) * 0.5
    assert isclose(components.vacation_due, expected)
    assert isclose(components.total, expected)


def test_mutual_agreement_halves_notice_and_splits_fgts():
    no_cause = run(TerminationType.NO_CAUSE).components
    agreement = run(TerminationType.AGREEMENT).components

    deposits = 3500 * 30 * 0.08
    assert isclose(agreement.notice, no_cause.notice / 2)
    assert isclose(agreement.fgts_balance, deposits * 0.8)
    assert isclose(agreement.fgts_penalty, deposits * 0.2)
    assert isclose(agreement.vacation_pro_rata, no_cause.vacation_pro_rata)
    assert isclose(agreement.thirteenth_pro_rata, no_cause.thirteenth_pro_rata)


@pytest.mark.parametrize("termination", list(TerminationType))
@pytest.mark.parametrize("vacation_days", [0, 10, 60])
def test_total_is_sum_of_components(termination, vacation_days):
    components = run(termination, wage=5120.0, months=77, vacation_days=vacation_days).components

    assert isclose(components.total, component_sum(components))


def test_notice_is_capped_at_ninety_days():
    assert notice_days(0) == 30
    assert notice_days(10) == 60
    assert notice_days(20) == 90
    assert notice_days(45) == 90


def test_whole_years_have_no_pro_rata():
    components = run(TerminationType.NO_CAUSE, months=24).components

    assert components.vacation_pro_rata == 0
    assert components.thirteenth_pro_rata == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"wage": 1000.0},
        {"tenure_months": -1},
        {"vacation_days": 61},
        {"termination_type": "aposentadoria"},
    ],
)
def test_request_rejects_out_of_range_input(overrides):
    values = {"wage": 3500.0, "tenure_months": 30, "vacation_days": 0, "termination_type": "sem-justa-causa"}
    values.update(overrides)
    with pytest.raises(ValueError):
        SeveranceRequest(**values)
