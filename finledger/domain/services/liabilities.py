"""Domain services for long-term liabilities."""

import math
from decimal import Decimal

from finledger.domain.models import (
    LongTermLiability,
    LongTermLiabilityStats,
    PayoffEstimate,
)
from finledger.utils.decimal_utils import coerce_decimal, sum_decimals


def compute_long_term_liability_stats(
    liability: LongTermLiability,
) -> LongTermLiabilityStats:
    """Compute linear payoff progress of a long-term liability.

    Args:
        liability: Liability snapshot.

    Returns:
        LongTermLiabilityStats: Totals paid and remaining, and the months
        left at the regular monthly payment.
    """
    total_paid = sum_decimals(payment.amount for payment in liability.payments)
    remaining = coerce_decimal(liability.original_amount) - total_paid
    monthly_payment = coerce_decimal(liability.monthly_payment)
    months = 0
    if monthly_payment > 0 and remaining > 0:
        months = math.ceil(remaining / monthly_payment)
    return LongTermLiabilityStats(
        total_paid=total_paid,
        remaining_balance=remaining,
        payments_made_count=len(liability.payments),
        estimated_months_to_payoff=months,
    )


def estimate_extra_payment_payoff(
    remaining_balance: Decimal,
    monthly_payment: Decimal,
    extra_payment: Decimal,
) -> PayoffEstimate:
    """Estimate how an extra monthly payment shortens the payoff.

    This is a linear estimate without interest.

    Raises:
        ValueError: If ``extra_payment`` is not positive.
    """
    extra = coerce_decimal(extra_payment)
    if extra <= 0:
        raise ValueError("Extra payment must be a positive amount")
    remaining = coerce_decimal(remaining_balance)
    monthly = coerce_decimal(monthly_payment)
    if remaining <= 0:
        return PayoffEstimate(original_months=0, new_months=0, months_saved=0)
    if monthly <= 0:
        return PayoffEstimate(
            original_months=None,
            new_months=math.ceil(remaining / extra),
            months_saved=0,
        )
    original_months = math.ceil(remaining / monthly)
    new_months = math.ceil(remaining / (monthly + extra))
    return PayoffEstimate(
        original_months=original_months,
        new_months=new_months,
        months_saved=max(0, original_months - new_months),
    )


__all__ = [
    "compute_long_term_liability_stats",
    "estimate_extra_payment_payoff",
]
