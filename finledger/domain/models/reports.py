"""Domain models for summary reports over the ledger."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .ledger import Transaction


@dataclass(frozen=True)
class CategoryTotal:
    """Amount accumulated on one category.

    Attributes:
        category_id: Category identifier.
        category_name: Display name, or a placeholder for unknown ids.
        total_amount: Sum of the contributing amounts.
        transactions: Contributing transactions in input order.
    """

    category_id: str
    category_name: str
    total_amount: Decimal
    transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class TaxSummary:
    """Tax-relevant income and deductions of one tax year."""

    year_label: str
    start_date: date
    end_date: date
    income: tuple[CategoryTotal, ...]
    deductions: tuple[CategoryTotal, ...]

    @property
    def total_income(self) -> Decimal:
        return sum((item.total_amount for item in self.income), Decimal("0"))

    @property
    def total_deductions(self) -> Decimal:
        return sum(
            (item.total_amount for item in self.deductions),
            Decimal("0"),
        )


@dataclass(frozen=True)
class EmergencyFundProgress:
    """Emergency fund balance against its target."""

    target: Decimal
    current: Decimal
    progress: Decimal


@dataclass(frozen=True)
class FinancialHealth:
    """Monthly health indicators shown on the dashboard.

    Attributes:
        month: (year, month) the income and expense figures cover.
        income: Income booked during the month.
        expenses: Expenses booked during the month.
        savings_rate: Share of income kept, as a percentage.
        average_monthly_expenses: Mean expenses of the trailing months.
        emergency_fund: Emergency fund progress.
        debt_to_income_ratio: Monthly debt service over gross income, as a
            percentage; None when no gross income is configured.
    """

    month: tuple[int, int]
    income: Decimal
    expenses: Decimal
    savings_rate: Decimal
    average_monthly_expenses: Decimal
    emergency_fund: EmergencyFundProgress
    debt_to_income_ratio: Decimal | None


__all__ = [
    "CategoryTotal",
    "TaxSummary",
    "EmergencyFundProgress",
    "FinancialHealth",
]
