"""Domain services for receivables and payables."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
import logging
from logging import Logger

from finledger.domain.models import (
    DateLike,
    ObligationStats,
    ObligationStatus,
    Payable,
    Payment,
    Receivable,
)
from finledger.domain.services.date_math import is_before, parse_local_date
from finledger.utils.decimal_utils import coerce_decimal, sum_decimals


def compute_obligation_stats(
    total_amount: Decimal,
    due_date: DateLike,
    payments: Iterable[Payment],
    *,
    as_of: date,
    logger: Logger | None = None,
) -> ObligationStats:
    """Compute paid, remaining and status figures for an obligation.

    Status precedence, first match wins: PAID when the payments cover the
    total, OVERDUE when the due date has passed with a balance left,
    PARTIALLY_PAID when something was paid, else PENDING.

    Args:
        total_amount: Amount owed.
        due_date: Due date of the full amount.
        payments: Payments recorded so far.
        as_of: Current calendar day of the computation.
        logger: Logger used for warnings.

    Returns:
        ObligationStats: Derived figures. The status is UNKNOWN when the due
        date can not be parsed and the obligation is not settled.
    """
    logger = logger or logging.getLogger(__name__)
    total = coerce_decimal(total_amount)
    paid = sum_decimals(payment.amount for payment in payments)
    remaining = total - paid

    if paid >= total:
        return ObligationStats(paid, remaining, ObligationStatus.PAID)

    overdue = is_before(parse_local_date(due_date), as_of)
    if overdue is None:
        logger.warning(
            f"Cannot derive obligation status, invalid due date: {due_date!r}"
        )
        return ObligationStats(paid, remaining, ObligationStatus.UNKNOWN)
    if overdue and remaining > 0:
        status = ObligationStatus.OVERDUE
    elif paid > 0:
        status = ObligationStatus.PARTIALLY_PAID
    else:
        status = ObligationStatus.PENDING
    return ObligationStats(paid, remaining, status)


def compute_receivable_stats(
    receivable: Receivable,
    *,
    as_of: date,
    logger: Logger | None = None,
) -> ObligationStats:
    """Compute obligation stats for a receivable."""
    return compute_obligation_stats(
        receivable.total_amount,
        receivable.due_date,
        receivable.payments,
        as_of=as_of,
        logger=logger,
    )


def compute_payable_stats(
    payable: Payable,
    *,
    as_of: date,
    logger: Logger | None = None,
) -> ObligationStats:
    """Compute obligation stats for a payable."""
    return compute_obligation_stats(
        payable.total_amount,
        payable.due_date,
        payable.payments,
        as_of=as_of,
        logger=logger,
    )


__all__ = [
    "compute_obligation_stats",
    "compute_receivable_stats",
    "compute_payable_stats",
]
