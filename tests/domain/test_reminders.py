"""Tests for upcoming payment reminders."""

from datetime import date
from decimal import Decimal

from finledger.domain.models import (
    CreditCard,
    PaymentStructure,
    RecurringFrequency,
    RecurringTransactionRule,
    ReminderKind,
    ShortTermLiability,
    TransactionType,
)
from finledger.domain.services.reminders import collect_reminders


def test_reminders_cover_each_source_within_window() -> None:
    """Due items within the window should be listed by due date."""
    rules = [
        RecurringTransactionRule(
            id="daily",
            description="Coffee",
            amount=Decimal("3"),
            type=TransactionType.EXPENSE,
            frequency=RecurringFrequency.DAILY,
            start_date="2024-01-10",
        ),
        RecurringTransactionRule(
            id="later",
            description="Insurance",
            amount=Decimal("40"),
            type=TransactionType.EXPENSE,
            frequency=RecurringFrequency.MONTHLY,
            start_date="2024-01-25",
        ),
        RecurringTransactionRule(
            id="off",
            description="Old",
            amount=Decimal("1"),
            type=TransactionType.EXPENSE,
            frequency=RecurringFrequency.DAILY,
            start_date="2024-01-01",
            is_active=False,
        ),
    ]
    liabilities = [
        ShortTermLiability(
            id="stl",
            name="Phone",
            original_amount=Decimal("600"),
            due_date="2024-12-31",
            created_at="2023-12-20",
            payment_structure=PaymentStructure.INSTALLMENTS,
            number_of_installments=12,
            payment_day_of_month=15,
        )
    ]
    cards = [
        CreditCard(
            id="c1",
            name="Visa",
            credit_limit=Decimal("1000"),
            available_balance=Decimal("600"),
            due_day_of_month=18,
        )
    ]

    reminders = collect_reminders(
        rules=rules,
        short_term_liabilities=liabilities,
        credit_cards=cards,
        as_of=date(2024, 1, 12),
        window_days=7,
    )

    summary = [
        (item.kind, item.source_id, item.due_date) for item in reminders
    ]
    assert summary == [
        (ReminderKind.RECURRING, "daily", date(2024, 1, 10)),
        (ReminderKind.INSTALLMENT, "stl", date(2024, 1, 15)),
        (ReminderKind.CREDIT_CARD, "c1", date(2024, 1, 18)),
    ]
    assert reminders[0].is_due is True
    assert reminders[1].amount == Decimal("50")
    assert reminders[1].is_due is False
    assert reminders[2].amount == Decimal("400")


def test_reminders_empty_without_sources() -> None:
    """No sources should give no reminders."""
    assert collect_reminders(as_of=date(2024, 1, 1)) == []
