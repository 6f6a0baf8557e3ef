from __future__ import annotations

from datetime import date

from futuro_financeiro.core.pension import project_pension
from futuro_financeiro.core.retirement import estimate_retirement
from futuro_financeiro.core.severance import calculate_severance
from futuro_financeiro.domain.report import (
    pension_parameter_lines,
    pension_report,
    retirement_report,
    severance_lines,
    severance_report,
)
from futuro_financeiro.schemas.pension import PensionRequest
from futuro_financeiro.schemas.retirement import PersonProfile
from futuro_financeiro.schemas.severance import SeveranceRequest

GENERATED_ON = date(2026, 10, 17)


def test_retirement_report_is_a_pdf():
    estimate = estimate_retirement(
        PersonProfile(name="João", age=58, contribution_years=30, average_wage=5200, gender="masculino")
    )

    pdf = retirement_report(estimate, generated_on=GENERATED_ON)

    assert pdf.startswith(b"%PDF")


def test_pension_report_is_a_pdf():
    projection = project_pension(PensionRequest(monthly_contribution=500, years=30, annual_rate=8))

    assert pension_report(projection, generated_on=GENERATED_ON).startswith(b"%PDF")


def test_severance_report_lists_only_non_zero_components():
    breakdown = calculate_severance(
        SeveranceRequest(wage=3500, tenure_months=30, vacation_days=0, termination_type="demissao")
    )

    labels = [label for label, _ in severance_lines(breakdown)]
    assert labels == ["Férias proporcionais", "13º salário proporcional"]
    assert severance_report(breakdown, generated_on=GENERATED_ON).startswith(b"%PDF")


def test_severance_report_handles_empty_breakdown():
    breakdown = calculate_severance(
        SeveranceRequest(wage=3500, tenure_months=24, vacation_days=0, termination_type="justa-causa")
    )

    assert severance_lines(breakdown) == []
    assert severance_report(breakdown).startswith(b"%PDF")


def test_pension_rate_is_printed_without_trailing_zero():
    whole = project_pension(PensionRequest(monthly_contribution=500, years=30, annual_rate=8))
    fractional = project_pension(PensionRequest(monthly_contribution=500, years=30, annual_rate=6.5))

    assert pension_parameter_lines(whole)[-1] == "Taxa de rentabilidade: 8% ao ano"
    assert pension_parameter_lines(fractional)[-1] == "Taxa de rentabilidade: 6.5% ao ano"
    assert pension_parameter_lines(whole)[0] == "Investimento mensal: R$ 500,00"
