"""Tests for the daily cash flow projection."""

from datetime import date
from decimal import Decimal
from types import GeneratorType

from finledger.domain.models import (
    CashFlowEvent,
    CreditCard,
    FlowDirection,
    Payable,
    Payment,
    PaymentMethod,
    PaymentStructure,
    ProjectionEvent,
    Receivable,
    RecurringFrequency,
    RecurringTransactionRule,
    ShortTermLiability,
    TransactionType,
)
from finledger.domain.services.cash_flow import (
    credit_card_due_events,
    installment_events,
    iter_cash_flow,
    obligation_events,
    project_cash_flow,
    recurring_events,
)

AS_OF = date(2024, 1, 1)


def test_projection_chains_daily_balances() -> None:
    """Each day should start from the previous day's closing balance."""
    events = [CashFlowEvent(date(2024, 1, 2), Decimal("-200"), "Groceries")]

    days = project_cash_flow(
        Decimal("500"),
        events,
        as_of=AS_OF,
        horizon_days=3,
    )

    assert [day.date for day in days] == [
        date(2024, 1, 1),
        date(2024, 1, 2),
        date(2024, 1, 3),
    ]
    balances = [
        (day.start_of_day_balance, day.end_of_day_balance) for day in days
    ]
    assert balances == [
        (Decimal("500"), Decimal("500")),
        (Decimal("500"), Decimal("300")),
        (Decimal("300"), Decimal("300")),
    ]
    assert days[0].events == ()
    assert days[1].events == (
        ProjectionEvent("Groceries", Decimal("200"), FlowDirection.OUTFLOW),
    )
    assert days[1].net_change == Decimal("-200")


def test_projection_applies_several_events_in_order() -> None:
    """Inflows and outflows on one day should net together."""
    events = [
        CashFlowEvent(AS_OF, Decimal("1000"), "Salary"),
        CashFlowEvent(AS_OF, Decimal("-300"), "Rent"),
    ]

    days = project_cash_flow(Decimal("0"), events, as_of=AS_OF, horizon_days=1)

    assert days[0].end_of_day_balance == Decimal("700")
    assert [event.direction for event in days[0].events] == [
        FlowDirection.INFLOW,
        FlowDirection.OUTFLOW,
    ]


def test_projection_with_empty_horizon() -> None:
    """Non-positive horizons should produce no days."""
    for horizon in (0, -2):
        days = project_cash_flow(
            Decimal("10"),
            [],
            as_of=AS_OF,
            horizon_days=horizon,
        )
        assert days == []


def test_iter_cash_flow_is_lazy() -> None:
    """The iterator form should yield days on demand."""
    days = iter_cash_flow(Decimal("0"), [], as_of=AS_OF, horizon_days=10_000)

    assert isinstance(days, GeneratorType)
    assert next(days).date == AS_OF


def test_recurring_events_follow_selected_accounts() -> None:
    """Only rules touching selected accounts should be projected."""
    base = {
        "amount": Decimal("50"),
        "type": TransactionType.EXPENSE,
        "frequency": RecurringFrequency.WEEKLY,
        "start_date": "2024-01-02",
    }
    rules = [
        RecurringTransactionRule(
            id="bank", description="Gym", bank_account_id="b1", **base
        ),
        RecurringTransactionRule(
            id="cash",
            description="Lunch",
            payment_method=PaymentMethod.CASH,
            **base,
        ),
        RecurringTransactionRule(
            id="other", description="Other", bank_account_id="b2", **base
        ),
    ]

    events = recurring_events(
        rules,
        as_of=AS_OF,
        horizon_days=10,
        account_ids=("b1", "cash"),
    )

    assert sorted((event.description, event.date) for event in events) == [
        ("Gym", date(2024, 1, 2)),
        ("Gym", date(2024, 1, 9)),
        ("Lunch", date(2024, 1, 2)),
        ("Lunch", date(2024, 1, 9)),
    ]
    assert all(event.amount == Decimal("-50") for event in events)


def test_installment_events_project_next_installment() -> None:
    """Installment liabilities should contribute their next payment."""
    liabilities = [
        ShortTermLiability(
            id="stl",
            name="Laptop",
            original_amount=Decimal("1200"),
            due_date="2024-12-31",
            created_at="2024-01-05",
            payment_structure=PaymentStructure.INSTALLMENTS,
            number_of_installments=12,
            payment_day_of_month=5,
            payments=(Payment(Decimal("250"), "2024-02-01"),),
        ),
        ShortTermLiability(
            id="single",
            name="Repair",
            original_amount=Decimal("300"),
            due_date="2024-03-01",
            payments=(Payment(Decimal("100"), "2024-02-01"),),
        ),
    ]

    events = installment_events(liabilities, as_of=date(2024, 2, 10))

    assert events == [
        CashFlowEvent(
            date(2024, 3, 5),
            Decimal("-100"),
            "Installment: Laptop",
        ),
        CashFlowEvent(date(2024, 3, 1), Decimal("-200"), "Liability: Repair"),
    ]


def test_credit_card_due_events_use_used_balance() -> None:
    """Cards should repay their used balance on the next due day."""
    cards = [
        CreditCard(
            id="c1",
            name="Visa",
            credit_limit=Decimal("1000"),
            available_balance=Decimal("600"),
            due_day_of_month=10,
        ),
        CreditCard(
            id="c2",
            name="Unused",
            credit_limit=Decimal("500"),
            available_balance=Decimal("500"),
            due_day_of_month=10,
        ),
    ]

    events = credit_card_due_events(
        cards,
        as_of=date(2024, 1, 12),
        horizon_days=30,
    )
    short = credit_card_due_events(
        cards,
        as_of=date(2024, 1, 12),
        horizon_days=7,
    )

    assert events == [
        CashFlowEvent(
            date(2024, 2, 10),
            Decimal("-400"),
            "Credit card due: Visa",
        )
    ]
    assert short == []


def test_obligation_events_use_remaining_amounts() -> None:
    """Unpaid receivables flow in and payables flow out on their due day."""
    receivables = [
        Receivable(
            id="r1",
            debtor_name="Sam",
            total_amount=Decimal("100"),
            due_date="2024-01-03",
            payments=(Payment(Decimal("40"), "2023-12-20"),),
        ),
        Receivable(
            id="r2",
            debtor_name="Paid",
            total_amount=Decimal("10"),
            due_date="2024-01-03",
            payments=(Payment(Decimal("10"), "2023-12-20"),),
        ),
    ]
    payables = [
        Payable(
            id="p1",
            creditor_name="Plumber",
            total_amount=Decimal("80"),
            due_date="2024-01-02",
        )
    ]

    events = obligation_events(receivables, payables, as_of=AS_OF)

    assert events == [
        CashFlowEvent(date(2024, 1, 3), Decimal("60"), "Receivable: Sam"),
        CashFlowEvent(date(2024, 1, 2), Decimal("-80"), "Payable: Plumber"),
    ]
