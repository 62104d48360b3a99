"""Domain services for short-term liabilities and their installments."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from functools import reduce
import logging
from logging import Logger

from finledger.domain.models import (
    InstallmentTally,
    InvalidDate,
    Payment,
    PaymentStructure,
    ShortTermLiability,
    ShortTermLiabilityStats,
    ShortTermLiabilityStatus,
)
from finledger.domain.services.date_math import (
    advance_months_anchored,
    compare_dates,
    is_before,
    parse_local_date,
)
from finledger.utils.decimal_utils import coerce_decimal, sum_decimals


def attribute_payment(
    tally: InstallmentTally,
    amount: Decimal,
    installment_amount: Decimal,
    number_of_installments: int,
) -> InstallmentTally:
    """Apply one payment to the running installment tally.

    The payment joins the carried remainder; every whole installment it
    covers is counted and the rest is carried forward. One large payment can
    therefore settle several installments and a small one none.

    Args:
        tally: Tally before the payment.
        amount: Payment amount.
        installment_amount: Size of one installment.
        number_of_installments: Upper bound of the count.

    Returns:
        InstallmentTally: Tally after the payment.
    """
    pool = tally.remainder + coerce_decimal(amount)
    covered = int(pool // installment_amount)
    covered = max(0, min(covered, number_of_installments - tally.count))
    return InstallmentTally(
        count=tally.count + covered,
        remainder=pool - covered * installment_amount,
    )


def count_paid_installments(
    payments: Iterable[Payment],
    installment_amount: Decimal,
    number_of_installments: int,
    *,
    logger: Logger | None = None,
) -> InstallmentTally:
    """Fold chronologically sorted payments into an installment tally."""
    ordered = sort_payments(payments, logger=logger)
    return reduce(
        lambda tally, payment: attribute_payment(
            tally,
            payment.amount,
            installment_amount,
            number_of_installments,
        ),
        ordered,
        InstallmentTally(count=0, remainder=Decimal("0")),
    )


def sort_payments(
    payments: Iterable[Payment],
    *,
    logger: Logger | None = None,
) -> list[Payment]:
    """Return payments in ascending date order.

    Payments with an unparseable date keep their relative order and are
    placed after every dated payment.
    """
    logger = logger or logging.getLogger(__name__)

    def _sort_key(payment: Payment) -> date:
        parsed = parse_local_date(payment.date)
        if isinstance(parsed, InvalidDate):
            logger.warning(
                f"Payment {payment.id or '<unnamed>'} has an invalid date "
                f"{payment.date!r}; ordering it last"
            )
            return date.max
        return parsed

    return sorted(payments, key=_sort_key)


def installment_due_date(
    created_at: date,
    payment_day_of_month: int,
    installments_paid: int,
) -> date:
    """Return the due date of the first unpaid installment.

    The schedule is anchored on ``payment_day_of_month`` in the month the
    liability was created and advanced one month per paid installment. A
    candidate that still falls on or before the creation date moves to the
    following month.
    """
    candidate = advance_months_anchored(
        created_at,
        installments_paid,
        payment_day_of_month,
    )
    if candidate <= created_at:
        candidate = advance_months_anchored(
            created_at,
            installments_paid + 1,
            payment_day_of_month,
        )
    return candidate


def compute_short_term_liability_stats(
    liability: ShortTermLiability,
    *,
    as_of: date,
    logger: Logger | None = None,
) -> ShortTermLiabilityStats:
    """Compute the derived state of a short-term liability.

    Args:
        liability: Liability snapshot.
        as_of: Current calendar day of the computation.
        logger: Logger used for warnings.

    Returns:
        ShortTermLiabilityStats: Payment progress, status and, for
        installment liabilities, the installment schedule position.
    """
    logger = logger or logging.getLogger(__name__)
    original = coerce_decimal(liability.original_amount)
    paid = sum_decimals(payment.amount for payment in liability.payments)
    remaining = original - paid
    final_due = parse_local_date(liability.due_date)
    final_overdue = is_before(final_due, as_of)
    if final_overdue is None:
        logger.warning(
            f"Liability {liability.id} has an invalid due date "
            f"{liability.due_date!r}"
        )

    status = _base_status(paid, original, final_overdue)
    installments_paid = 0
    installment_amount = None
    next_due = None
    installment_overdue = False
    months_to_payoff = None

    created_at = _installment_anchor(liability, logger)
    if created_at is not None:
        installments = liability.number_of_installments
        installment_amount = original / installments
        tally = count_paid_installments(
            liability.payments,
            installment_amount,
            installments,
            logger=logger,
        )
        installments_paid = tally.count

        if status == ShortTermLiabilityStatus.PAID:
            months_to_payoff = 0
        elif installments_paid < installments:
            candidate = installment_due_date(
                created_at,
                liability.payment_day_of_month,
                installments_paid,
            )
            within_term = compare_dates(candidate, final_due)
            if within_term is None or within_term <= 0:
                next_due = candidate
                months_to_payoff = installments - installments_paid
                if candidate < as_of:
                    installment_overdue = True
                    status = ShortTermLiabilityStatus.OVERDUE
                elif status not in (
                    ShortTermLiabilityStatus.OVERDUE,
                    ShortTermLiabilityStatus.PARTIALLY_PAID,
                    ShortTermLiabilityStatus.UNKNOWN,
                ):
                    status = ShortTermLiabilityStatus.UPCOMING
        elif remaining > 0:
            # Every installment counted but rounding left a balance.
            status = ShortTermLiabilityStatus.PARTIALLY_PAID

    if (
        status != ShortTermLiabilityStatus.PAID
        and final_overdue
        and remaining > 0
    ):
        status = ShortTermLiabilityStatus.OVERDUE

    return ShortTermLiabilityStats(
        paid=paid,
        remaining=remaining,
        status=status,
        installments_paid_count=installments_paid,
        monthly_installment_amount=installment_amount,
        next_installment_due_date=next_due,
        is_installment_overdue=installment_overdue,
        estimated_months_to_payoff=months_to_payoff,
    )


def _base_status(
    paid: Decimal,
    original: Decimal,
    final_overdue: bool | None,
) -> ShortTermLiabilityStatus:
    if paid >= original:
        return ShortTermLiabilityStatus.PAID
    if paid > 0:
        return ShortTermLiabilityStatus.PARTIALLY_PAID
    if final_overdue is None:
        return ShortTermLiabilityStatus.UNKNOWN
    if final_overdue:
        return ShortTermLiabilityStatus.OVERDUE
    return ShortTermLiabilityStatus.UPCOMING


def _installment_anchor(
    liability: ShortTermLiability,
    logger: Logger,
) -> date | None:
    """Return the creation date when installment tracking applies."""
    if liability.payment_structure != PaymentStructure.INSTALLMENTS:
        return None
    installments = liability.number_of_installments
    if not installments or installments <= 0:
        return None
    if not liability.payment_day_of_month or liability.created_at is None:
        return None
    if coerce_decimal(liability.original_amount) <= 0:
        return None
    created_at = parse_local_date(liability.created_at)
    if isinstance(created_at, InvalidDate):
        logger.warning(
            f"Liability {liability.id} has an invalid creation date "
            f"{liability.created_at!r}; installment schedule skipped"
        )
        return None
    return created_at


__all__ = [
    "attribute_payment",
    "count_paid_installments",
    "sort_payments",
    "installment_due_date",
    "compute_short_term_liability_stats",
]
