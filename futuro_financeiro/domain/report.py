"""Printable PDF reports mirroring the on-screen result cards."""

from datetime import date
from io import BytesIO
from typing import List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from futuro_financeiro.core.formatting import format_currency, format_date, format_percent
from futuro_financeiro.schemas.pension import PensionProjection
from futuro_financeiro.schemas.retirement import Gender, RetirementEstimate
from futuro_financeiro.schemas.severance import SeveranceBreakdown

BRAND = "Meu Futuro Financeiro"
DISCLAIMER = (
    "Este relatório contém estimativas baseadas na legislação vigente. "
    "Consulte um especialista para orientações específicas."
)
HIGHLIGHT = colors.Color(22 / 255, 163 / 255, 74 / 255)

TITLE_STYLE = ParagraphStyle("title", fontName="Helvetica-Bold", fontSize=16, leading=20)
HEADING_STYLE = ParagraphStyle("heading", fontName="Helvetica-Bold", fontSize=12, leading=16, spaceBefore=6)
BODY_STYLE = ParagraphStyle("body", fontName="Helvetica", fontSize=10, leading=14)
FOOTER_STYLE = ParagraphStyle("footer", fontName="Helvetica-Oblique", fontSize=8, leading=10)


def _header(title: str, generated_on: date) -> List[Flowable]:
    return [
        Paragraph(BRAND, TITLE_STYLE),
        Paragraph(title, HEADING_STYLE),
        Paragraph(f"Gerado em: {format_date(generated_on)}", BODY_STYLE),
        Spacer(1, 8),
    ]


def _section(title: str, lines: Sequence[str]) -> List[Flowable]:
    return [Paragraph(title, HEADING_STYLE)] + [Paragraph(line, BODY_STYLE) for line in lines] + [Spacer(1, 6)]


def _highlight(label: str, amount: float) -> Table:
    box = Table([[label], [format_currency(amount)]], colWidths=[170 * mm])
    box.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), HIGHLIGHT),
                ("TEXTCOLOR", (0, 0), (-1, -1), colors.white),
                ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 14),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
            ]
        )
    )
    return box


def _build(elements: List[Flowable]) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title=BRAND,
    )
    elements.append(Spacer(1, 12))
    elements.append(Paragraph(DISCLAIMER, FOOTER_STYLE))
    doc.build(elements)
    return buffer.getvalue()


def retirement_report(estimate: RetirementEstimate, generated_on: Optional[date] = None) -> bytes:
    profile = estimate.profile
    years_label = "ano" if estimate.remaining_years == 1 else "anos"
    elements = _header("Simulação de Aposentadoria INSS", generated_on or date.today())
    elements += _section(
        "Dados Pessoais",
        [
            f"Nome: {profile.name or '-'}",
            f"Idade atual: {profile.age} anos",
            f"Gênero: {'Masculino' if profile.gender == Gender.MALE else 'Feminino'}",
            f"Tempo de contribuição: {profile.contribution_years} anos",
            f"Salário médio: {format_currency(profile.average_wage)}",
        ],
    )
    elements += [Paragraph("Resultado da Simulação", HEADING_STYLE)]
    elements += [_highlight("Valor Estimado da Aposentadoria:", estimate.estimated_benefit), Spacer(1, 8)]
    elements += _section(
        "Detalhes",
        [
            f"Tempo restante para aposentar: {estimate.remaining_years} {years_label}",
            f"Idade na aposentadoria: {estimate.retirement_age} anos",
            f"Data estimada: {format_date(estimate.retirement_date)}",
            f"Regra aplicada: {estimate.rule}",
        ],
    )
    return _build(elements)


def pension_parameter_lines(projection: PensionProjection) -> List[str]:
    return [
        f"Investimento mensal: {format_currency(projection.monthly_contribution)}",
        f"Período: {projection.years} anos",
        # 8 prints as "8%", 6.5 as "6.5%"
        f"Taxa de rentabilidade: {projection.annual_rate:g}% ao ano",
    ]


def pension_report(projection: PensionProjection, generated_on: Optional[date] = None) -> bytes:
    yield_percent = projection.total_yield / projection.total_contributed * 100
    elements = _header("Simulação de Previdência Privada", generated_on or date.today())
    elements += _section("Parâmetros da Simulação", pension_parameter_lines(projection))
    elements += [Paragraph("Resultado da Simulação", HEADING_STYLE)]
    elements += [_highlight("Valor Total Acumulado:", projection.final_balance), Spacer(1, 8)]
    elements += _section(
        "Detalhes",
        [
            f"Total investido: {format_currency(projection.total_contributed)}",
            f"Rendimento obtido: {format_currency(projection.total_yield)}",
            f"Rentabilidade total: {format_percent(yield_percent)}",
        ],
    )

    rows = [["Idade", "Valor Acumulado", "Contribuição", "Rendimento"]]
    for entry in projection.projection[-5:]:
        rows.append(
            [
                str(entry.age),
                format_currency(entry.balance),
                format_currency(entry.cumulative_contribution),
                format_currency(entry.cumulative_yield),
            ]
        )
    table = Table(rows, colWidths=[25 * mm, 50 * mm, 50 * mm, 45 * mm])
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.black),
                ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
            ]
        )
    )
    elements += [Paragraph("Projeção - Últimos 5 Anos", HEADING_STYLE), table]
    return _build(elements)


def severance_lines(breakdown: SeveranceBreakdown) -> List[Tuple[str, float]]:
    """Labelled non-zero components, in display order."""
    components = breakdown.components
    labelled = [
        ("Aviso prévio", components.notice),
        ("Férias vencidas", components.vacation_due),
        ("Férias proporcionais", components.vacation_pro_rata),
        ("13º salário proporcional", components.thirteenth_pro_rata),
        ("FGTS disponível", components.fgts_balance),
        ("Multa do FGTS", components.fgts_penalty),
    ]
    return [(label, value) for label, value in labelled if value > 0]


def severance_report(breakdown: SeveranceBreakdown, generated_on: Optional[date] = None) -> bytes:
    elements = _header("Cálculo de Rescisão Trabalhista", generated_on or date.today())
    elements += _section(
        "Dados do Contrato",
        [
            f"Salário atual: {format_currency(breakdown.wage)}",
            f"Tempo de empresa: {breakdown.tenure_years} anos e {breakdown.pro_rata_months} meses",
            f"Férias vencidas: {breakdown.vacation_days} dias",
            f"Tipo de rescisão: {breakdown.termination_type.label}",
        ],
    )
    elements += [_highlight("Total a Receber:", breakdown.components.total), Spacer(1, 8)]

    rows = [[label, format_currency(value)] for label, value in severance_lines(breakdown)]
    rows.append(["TOTAL:", format_currency(breakdown.components.total)])
    table = Table(rows, colWidths=[120 * mm, 50 * mm])
    table.setStyle(
        TableStyle(
            [
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                ("LINEABOVE", (1, -1), (1, -1), 0.5, colors.black),
            ]
        )
    )
    elements += [Paragraph("Detalhamento dos Valores", HEADING_STYLE), table]
    return _build(elements)
