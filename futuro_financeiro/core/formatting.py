"""pt-BR display helpers shared by the API and the PDF reports."""

import re
from datetime import date
from typing import Optional

_CURRENCY_RE = re.compile(r"^(-)?\s*R\$\s*(\d{1,3}(?:\.\d{3})*|\d+),(\d{2})$")


def format_currency(value: float) -> str:
    """Format as Brazilian real, e.g. ``R$ 1.234,56``."""
    rounded = round(value, 2)
    sign = "-" if rounded < 0 else ""
    text = f"{abs(rounded):,.2f}".replace(",", "TEMP").replace(".", ",").replace("TEMP", ".")
    return f"{sign}R$ {text}"


def parse_currency(text: str) -> float:
    """Inverse of :func:`format_currency`."""
    match = _CURRENCY_RE.match(text.strip().replace("\xa0", " "))
    if match is None:
        raise ValueError(f"not a BRL amount: {text!r}")
    negative, integer, cents = match.groups()
    value = float(f"{integer.replace('.', '')}.{cents}")
    return -value if negative else value


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_date(value: date) -> str:
    """Day/month/year, e.g. ``17/10/2026``."""
    return value.strftime("%d/%m/%Y")


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """Whole years between ``birth_date`` and ``today``."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
