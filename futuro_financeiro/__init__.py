"""Meu Futuro Financeiro: INSS, private pension and severance calculators."""

__version__ = "0.1.0"
