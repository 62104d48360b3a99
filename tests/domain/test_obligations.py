"""Tests for receivable and payable statuses."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finledger.domain.models import (
    ObligationStatus,
    Payable,
    Payment,
    Receivable,
)
from finledger.domain.services.obligations import (
    compute_obligation_stats,
    compute_payable_stats,
    compute_receivable_stats,
)

AS_OF = date(2024, 3, 15)


def test_paid_wins_regardless_of_due_date() -> None:
    """Covered obligations should be PAID even when past due."""
    stats = compute_obligation_stats(
        Decimal("100"),
        "2024-01-01",
        [
            Payment(Decimal("60"), "2024-01-10"),
            Payment(Decimal("40"), "2024-02-01"),
        ],
        as_of=AS_OF,
    )

    assert stats.status == ObligationStatus.PAID
    assert stats.paid == Decimal("100")
    assert stats.remaining == Decimal("0")


def test_overpayment_keeps_negative_remaining() -> None:
    """Remaining should not be clamped on overpayment."""
    stats = compute_obligation_stats(
        Decimal("100"),
        "2024-04-01",
        [Payment(Decimal("120"), "2024-03-01")],
        as_of=AS_OF,
    )

    assert stats.status == ObligationStatus.PAID
    assert stats.remaining == Decimal("-20")


def test_overdue_takes_precedence_over_partial_payment() -> None:
    """A past due date with a balance left should be OVERDUE."""
    stats = compute_obligation_stats(
        Decimal("100"),
        date(2024, 3, 14),
        [Payment(Decimal("30"), "2024-03-01")],
        as_of=AS_OF,
    )

    assert stats.status == ObligationStatus.OVERDUE
    assert stats.remaining == Decimal("70")


def test_due_today_is_not_overdue() -> None:
    """An obligation due on as_of should still be pending."""
    pending = compute_obligation_stats(
        Decimal("100"), "2024-03-15", [], as_of=AS_OF
    )
    partial = compute_obligation_stats(
        Decimal("100"),
        "2024-03-15",
        [Payment(Decimal("10"), "2024-03-01")],
        as_of=AS_OF,
    )

    assert pending.status == ObligationStatus.PENDING
    assert partial.status == ObligationStatus.PARTIALLY_PAID


def test_invalid_due_date_reports_unknown_and_warns() -> None:
    """An unparseable due date should yield UNKNOWN with a warning."""
    logger = MagicMock()

    stats = compute_obligation_stats(
        Decimal("100"), "31/12/2024", [], as_of=AS_OF, logger=logger
    )

    assert stats.status == ObligationStatus.UNKNOWN
    logger.warning.assert_called_once()


def test_wrappers_use_entity_fields() -> None:
    """Receivable and payable helpers should read their snapshots."""
    receivable = Receivable(
        id="r1",
        debtor_name="Alex",
        total_amount=Decimal("50"),
        due_date="2024-04-01",
    )
    payable = Payable(
        id="p1",
        creditor_name="Landlord",
        total_amount=Decimal("800"),
        due_date="2024-03-01",
        payments=(Payment(Decimal("200"), "2024-02-20"),),
    )

    assert compute_receivable_stats(receivable, as_of=AS_OF).status == (
        ObligationStatus.PENDING
    )
    payable_stats = compute_payable_stats(payable, as_of=AS_OF)
    assert payable_stats.status == ObligationStatus.OVERDUE
    assert payable_stats.remaining == Decimal("600")
