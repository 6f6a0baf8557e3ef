from __future__ import annotations

from math import isclose

import pytest

from futuro_financeiro.core.pension import future_value, monthly_rate, project_pension
from futuro_financeiro.schemas.pension import PensionRequest


def test_thirty_year_plan_matches_closed_form():
    request = PensionRequest(monthly_contribution=500, years=30, annual_rate=8, current_age=30)
    result = project_pension(request)

    rate = 8 / 100 / 12
    expected = 500 * (((1 + rate) ** 360 - 1) / rate)

    assert isclose(result.final_balance, expected, rel_tol=1e-12)
    assert isclose(result.final_balance, 745180, rel_tol=1e-4)
    assert len(result.projection) == 30
    assert [entry.age for entry in result.projection] == list(range(31, 61))
    assert result.projection[-1].balance == result.final_balance


def test_every_entry_splits_balance_into_contribution_and_yield():
    result = project_pension(PensionRequest(monthly_contribution=250, years=12, annual_rate=6.5))

    for year, entry in enumerate(result.projection, start=1):
        assert isclose(entry.cumulative_contribution, 250 * 12 * year)
        assert isclose(entry.cumulative_yield, entry.balance - entry.cumulative_contribution)
        assert entry.cumulative_yield > 0

    assert isclose(result.total_contributed, 250 * 12 * 12)
    assert isclose(result.total_yield, result.final_balance - result.total_contributed)


def test_balances_grow_every_year():
    result = project_pension(PensionRequest(monthly_contribution=100, years=10, annual_rate=0.1))

    balances = [entry.balance for entry in result.projection]
    assert balances == sorted(balances)
    assert len(set(balances)) == len(balances)


def test_zero_rate_falls_back_to_linear_accumulation():
    assert future_value(500, 0.0, 24) == 12000
    assert monthly_rate(12) == pytest.approx(0.01)


def test_default_age_is_thirty():
    result = project_pension(PensionRequest(monthly_contribution=50, years=1, annual_rate=10))

    assert result.current_age == 30
    assert result.projection[0].age == 31
    assert result.id.startswith("prev-")


@pytest.mark.parametrize(
    "overrides",
    [
        {"monthly_contribution": 49.99},
        {"years": 0},
        {"years": 51},
        {"annual_rate": 0},
        {"annual_rate": 30.5},
        {"current_age": 17},
    ],
)
def test_request_rejects_out_of_range_input(overrides):
    values = {"monthly_contribution": 500, "years": 30, "annual_rate": 8}
    values.update(overrides)
    with pytest.raises(ValueError):
        PensionRequest(**values)
