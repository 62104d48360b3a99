"""Tax year helpers (April 1 to March 31)."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
import logging
from logging import Logger

from finledger.domain.constants import (
    TAX_YEAR_END_DAY,
    TAX_YEAR_END_MONTH,
    TAX_YEAR_START_DAY,
    TAX_YEAR_START_MONTH,
)
from finledger.domain.models import (
    Category,
    CategoryTotal,
    InvalidDate,
    TaxRelevance,
    TaxSummary,
    Transaction,
    TransactionType,
)
from finledger.domain.services.date_math import parse_local_date
from finledger.utils.decimal_utils import coerce_decimal


def tax_year_date_range(year_label: str) -> tuple[date, date] | None:
    """Return the first and last day of a tax year labelled ``2023/2024``.

    Returns None for malformed labels or non-consecutive years.
    """
    parts = year_label.split("/") if year_label else []
    if len(parts) != 2:
        return None
    try:
        start_year = int(parts[0])
        end_year = int(parts[1])
    except ValueError:
        return None
    if end_year != start_year + 1:
        return None
    return (
        date(start_year, TAX_YEAR_START_MONTH, TAX_YEAR_START_DAY),
        date(end_year, TAX_YEAR_END_MONTH, TAX_YEAR_END_DAY),
    )


def tax_year_label_for(day: date) -> str:
    """Return the label of the tax year containing ``day``."""
    start = date(day.year, TAX_YEAR_START_MONTH, TAX_YEAR_START_DAY)
    first_year = day.year if day >= start else day.year - 1
    return f"{first_year}/{first_year + 1}"


def compute_tax_summary(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    year_label: str,
    *,
    logger: Logger | None = None,
) -> TaxSummary | None:
    """Total tax-relevant income and deductions per category for a tax year.

    A transaction counts when it is flagged tax relevant, falls inside the
    tax year (both bounds included) and its category carries the matching
    relevance: income on an income category, an expense on a deduction
    category. Transactions without a known category are left out.

    Args:
        transactions: Ledger transactions.
        categories: Known categories.
        year_label: Tax year label such as ``2023/2024``.
        logger: Logger used for warnings.

    Returns:
        TaxSummary | None: Per-category totals in order of first appearance,
        or None when the label is malformed.
    """
    logger = logger or logging.getLogger(__name__)
    bounds = tax_year_date_range(year_label)
    if bounds is None:
        logger.warning(f"Invalid tax year label {year_label!r}")
        return None
    start, end = bounds
    by_id = {category.id: category for category in categories}
    income: dict[str, list[Transaction]] = {}
    deductions: dict[str, list[Transaction]] = {}

    for transaction in transactions:
        if not transaction.is_tax_relevant:
            continue
        booked = parse_local_date(transaction.date)
        if isinstance(booked, InvalidDate):
            logger.warning(
                f"Skipping transaction {transaction.id} with invalid date "
                f"{transaction.date!r}"
            )
            continue
        if not start <= booked <= end:
            continue
        category = by_id.get(transaction.category_id)
        if category is None:
            continue
        relevance = category.default_tax_relevance
        if (
            transaction.type == TransactionType.INCOME
            and relevance == TaxRelevance.INCOME
        ):
            income.setdefault(category.id, []).append(transaction)
        elif (
            transaction.type == TransactionType.EXPENSE
            and relevance == TaxRelevance.DEDUCTION
        ):
            deductions.setdefault(category.id, []).append(transaction)

    return TaxSummary(
        year_label=year_label,
        start_date=start,
        end_date=end,
        income=_totals(income, by_id),
        deductions=_totals(deductions, by_id),
    )


def _totals(
    grouped: dict[str, list[Transaction]],
    by_id: dict[str, Category],
) -> tuple[CategoryTotal, ...]:
    return tuple(
        CategoryTotal(
            category_id=category_id,
            category_name=by_id[category_id].name,
            total_amount=sum(
                (coerce_decimal(item.amount) for item in items),
                Decimal("0"),
            ),
            transactions=tuple(items),
        )
        for category_id, items in grouped.items()
    )


__all__ = [
    "tax_year_date_range",
    "tax_year_label_for",
    "compute_tax_summary",
]
