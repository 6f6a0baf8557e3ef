"""INSS and labor-law constants (2024 values)."""

# INSS
BENEFIT_CEILING = 7786.02
MIN_RETIREMENT_AGE_MALE = 65
MIN_RETIREMENT_AGE_FEMALE = 62
MIN_CONTRIBUTION_YEARS = 15
BASE_BENEFIT_FACTOR = 0.6
EXTRA_PERCENT_PER_YEAR = 0.02
RETIREMENT_RULE = "Regra de transição por idade"

MINIMUM_WAGE = 1320.0

# CLT
NOTICE_BASE_DAYS = 30
NOTICE_EXTRA_DAYS_PER_YEAR = 3
NOTICE_MAX_DAYS = 90
FGTS_RATE = 0.08
FGTS_PENALTY_RATE = 0.4
AGREEMENT_FGTS_WITHDRAWAL = 0.8
AGREEMENT_FGTS_PENALTY = 0.2
VACATION_BONUS = 1 / 3
DAYS_PER_MONTH = 30
