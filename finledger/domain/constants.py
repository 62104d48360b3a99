"""Domain constants for ledger calculations."""

from decimal import Decimal

NEARING_LIMIT_THRESHOLD = Decimal("90")
FULL_PROGRESS = Decimal("100")

DEFAULT_PROJECTION_DAYS = 7
DEFAULT_REMINDER_DAYS = 7

CASH_ACCOUNT_ID = "cash"
CASH_TO_BANK_CATEGORY_ID = "cat_sys_cash_to_bank"

UNCATEGORIZED_NAME = "Uncategorized"
UNKNOWN_CATEGORY_NAME = "Unknown Category"

AVERAGE_EXPENSE_MONTHS = 3

TAX_YEAR_START_MONTH = 4
TAX_YEAR_START_DAY = 1
TAX_YEAR_END_MONTH = 3
TAX_YEAR_END_DAY = 31


__all__ = [
    "NEARING_LIMIT_THRESHOLD",
    "FULL_PROGRESS",
    "DEFAULT_PROJECTION_DAYS",
    "DEFAULT_REMINDER_DAYS",
    "CASH_ACCOUNT_ID",
    "CASH_TO_BANK_CATEGORY_ID",
    "UNCATEGORIZED_NAME",
    "UNKNOWN_CATEGORY_NAME",
    "AVERAGE_EXPENSE_MONTHS",
    "TAX_YEAR_START_MONTH",
    "TAX_YEAR_START_DAY",
    "TAX_YEAR_END_MONTH",
    "TAX_YEAR_END_DAY",
]
