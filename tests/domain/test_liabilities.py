"""Tests for long-term liability payoff estimates."""

from decimal import Decimal

import pytest

from finledger.domain.models import LongTermLiability, Payment, PayoffEstimate
from finledger.domain.services.liabilities import (
    compute_long_term_liability_stats,
    estimate_extra_payment_payoff,
)


def test_long_term_stats_round_months_up() -> None:
    """Months to payoff should be rounded up."""
    liability = LongTermLiability(
        id="car",
        name="Car loan",
        original_amount=Decimal("10000"),
        monthly_payment=Decimal("300"),
        payments=(
            Payment(Decimal("300"), "2024-01-01"),
            Payment(Decimal("300"), "2024-02-01"),
        ),
    )

    stats = compute_long_term_liability_stats(liability)

    assert stats.total_paid == Decimal("600")
    assert stats.remaining_balance == Decimal("9400")
    assert stats.payments_made_count == 2
    assert stats.estimated_months_to_payoff == 32


def test_long_term_stats_without_monthly_payment() -> None:
    """No monthly payment should give no payoff estimate."""
    liability = LongTermLiability(
        id="family",
        name="Family loan",
        original_amount=Decimal("500"),
        monthly_payment=Decimal("0"),
    )

    assert compute_long_term_liability_stats(
        liability
    ).estimated_months_to_payoff == 0


def test_extra_payment_shortens_payoff() -> None:
    """An extra payment should reduce the number of months."""
    estimate = estimate_extra_payment_payoff(
        Decimal("9400"),
        Decimal("300"),
        Decimal("100"),
    )

    assert estimate == PayoffEstimate(
        original_months=32,
        new_months=24,
        months_saved=8,
    )


def test_extra_payment_edge_cases() -> None:
    """Settled loans and missing payments should be handled."""
    assert estimate_extra_payment_payoff(
        Decimal("0"), Decimal("300"), Decimal("50")
    ) == PayoffEstimate(0, 0, 0)
    assert estimate_extra_payment_payoff(
        Decimal("1000"), Decimal("0"), Decimal("250")
    ) == PayoffEstimate(None, 4, 0)
    with pytest.raises(ValueError):
        estimate_extra_payment_payoff(Decimal("1000"), Decimal("100"), 0)
