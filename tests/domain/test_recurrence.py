"""Tests for recurring rule scheduling and processing."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finledger.domain.models import (
    InvalidDate,
    Occurrence,
    RecurringFrequency,
    RecurringTransactionRule,
    TransactionType,
)
from finledger.domain.services.recurrence import (
    compute_next_due_date,
    first_occurrence,
    js_weekday,
    next_occurrence,
    occurrence_dates,
    process_due_rules,
)


def _rule(frequency, start="2024-01-31", **kwargs) -> RecurringTransactionRule:
    defaults = {
        "id": "r1",
        "description": "Rent",
        "amount": Decimal("900"),
        "type": TransactionType.EXPENSE,
        "frequency": frequency,
        "start_date": start,
    }
    defaults.update(kwargs)
    return RecurringTransactionRule(**defaults)


def test_monthly_anchor_survives_short_months() -> None:
    """Day 31 should clamp in February and come back in March."""
    rule = _rule(RecurringFrequency.MONTHLY, day_of_month=31)

    first = first_occurrence(rule)
    second = next_occurrence(rule, first.date)
    third = next_occurrence(rule, second.date)

    assert first == Occurrence(date(2024, 1, 31))
    assert second == Occurrence(date(2024, 2, 29))
    assert third == Occurrence(date(2024, 3, 31))


def test_monthly_rule_without_day_keeps_start_day() -> None:
    """A Jan 31 start should not drift to the 29th after February."""
    rule = _rule(RecurringFrequency.MONTHLY)

    second = next_occurrence(rule, "2024-01-31").date
    third = next_occurrence(rule, second).date

    assert second == date(2024, 2, 29)
    assert third == date(2024, 3, 31)


def test_monthly_first_occurrence_moves_past_start() -> None:
    """A day of month before the start day begins the next month."""
    rule = _rule(
        RecurringFrequency.MONTHLY,
        start="2024-01-20",
        day_of_month=5,
    )

    assert first_occurrence(rule).date == date(2024, 2, 5)


def test_weekly_rule_aligns_to_weekday() -> None:
    """Weekly rules should land on the configured weekday."""
    rule = _rule(
        RecurringFrequency.WEEKLY,
        start="2024-01-03",
        day_of_week=1,
    )

    first = first_occurrence(rule).date
    second = next_occurrence(rule, first).date

    assert first == date(2024, 1, 8)
    assert js_weekday(first) == 1
    assert second == date(2024, 1, 15)


def test_daily_and_yearly_steps() -> None:
    """Daily rules step one day and yearly rules one year."""
    daily = _rule(RecurringFrequency.DAILY, start="2024-02-28")
    yearly = _rule(
        RecurringFrequency.YEARLY,
        start="2024-02-29",
        day_of_month=29,
    )

    assert next_occurrence(daily, "2024-02-28").date == date(2024, 2, 29)
    assert next_occurrence(yearly, "2024-02-29").date == date(2025, 2, 28)
    assert next_occurrence(yearly, "2027-02-28").date == date(2028, 2, 29)


@pytest.mark.parametrize(
    "frequency, extra",
    [
        (RecurringFrequency.DAILY, {}),
        (RecurringFrequency.WEEKLY, {"day_of_week": 0}),
        (RecurringFrequency.WEEKLY, {}),
        (RecurringFrequency.MONTHLY, {"day_of_month": 31}),
        (RecurringFrequency.MONTHLY, {}),
        (RecurringFrequency.YEARLY, {}),
    ],
)
def test_next_occurrence_always_moves_forward(frequency, extra) -> None:
    """Feeding an occurrence back should yield a strictly later date."""
    rule = _rule(frequency, **extra)
    current = first_occurrence(rule).date
    for _ in range(40):
        following = next_occurrence(rule, current)
        assert following.exhausted is False
        assert following.date > current
        current = following.date


def test_last_processed_before_start_uses_first_occurrence() -> None:
    """A processed date before the start should not schedule earlier."""
    rule = _rule(RecurringFrequency.MONTHLY, day_of_month=31)

    assert next_occurrence(rule, "2023-11-30").date == date(2024, 1, 31)


def test_end_date_marks_rule_exhausted() -> None:
    """Occurrences past the end date should return the end date as terminal."""
    rule = _rule(
        RecurringFrequency.MONTHLY,
        start="2024-01-15",
        end_date="2024-03-01",
    )

    result = next_occurrence(rule, "2024-02-15")

    assert result == Occurrence(date(2024, 3, 1), exhausted=True)


def test_invalid_start_date_is_reported() -> None:
    """Malformed start dates should return a marker and warn."""
    logger = MagicMock()
    rule = _rule(RecurringFrequency.DAILY, start="soon")

    result = first_occurrence(rule, logger=logger)

    assert isinstance(result.date, InvalidDate)
    logger.warning.assert_called_once()


def test_compute_next_due_date_uses_processing_state() -> None:
    """The next due date should continue from the last processed date."""
    fresh = _rule(RecurringFrequency.DAILY, start="2024-01-01")
    processed = _rule(
        RecurringFrequency.DAILY,
        start="2024-01-01",
        last_processed_date="2024-01-09",
    )

    assert compute_next_due_date(fresh).date == date(2024, 1, 1)
    assert compute_next_due_date(processed).date == date(2024, 1, 10)


def test_process_due_rules_generates_transaction_and_advances() -> None:
    """Due rules should produce one transaction and move forward."""
    due = _rule(
        RecurringFrequency.MONTHLY,
        start="2024-01-10",
        category_id="housing",
        bank_account_id="bank-1",
    )
    future = _rule(RecurringFrequency.MONTHLY, id="r2", start="2024-02-01")
    inactive = _rule(RecurringFrequency.DAILY, id="r3", is_active=False)

    result = process_due_rules(
        [due, future, inactive],
        as_of=date(2024, 1, 20),
    )

    assert result.processed_count == 1
    transaction = result.generated_transactions[0]
    assert transaction.id == "txn_rt_r1_2024-01-10"
    assert transaction.date == date(2024, 1, 10)
    assert transaction.amount == Decimal("900")
    assert transaction.bank_account_id == "bank-1"
    assert transaction.recurring_transaction_id == "r1"
    updated = result.rules[0]
    assert updated.last_processed_date == date(2024, 1, 10)
    assert updated.next_due_date == date(2024, 2, 10)
    assert updated.is_active is True
    assert result.rules[1] is future
    assert result.rules[2] is inactive
    assert due.last_processed_date is None


def test_process_due_rules_respects_selection() -> None:
    """Only selected rules should be processed when a subset is given."""
    first = _rule(RecurringFrequency.DAILY, start="2024-01-01")
    second = _rule(RecurringFrequency.DAILY, id="r2", start="2024-01-01")

    result = process_due_rules(
        [first, second],
        as_of=date(2024, 1, 1),
        selected_ids={"r2"},
    )

    generated = result.generated_transactions
    assert [txn.recurring_transaction_id for txn in generated] == ["r2"]
    assert result.rules[0] is first


def test_process_due_rules_deactivates_exhausted_rules() -> None:
    """Rules past their end date should be deactivated without output."""
    rule = _rule(
        RecurringFrequency.MONTHLY,
        start="2024-01-10",
        end_date="2024-01-05",
    )

    result = process_due_rules([rule], as_of=date(2024, 2, 1))

    assert result.processed_count == 0
    assert result.rules[0].is_active is False
    assert result.rules[0].next_due_date == date(2024, 1, 5)


def test_last_occurrence_before_end_deactivates_rule() -> None:
    """Processing the final occurrence should deactivate the rule."""
    rule = _rule(
        RecurringFrequency.MONTHLY,
        start="2024-01-10",
        end_date="2024-01-31",
    )

    result = process_due_rules([rule], as_of=date(2024, 1, 15))

    assert result.processed_count == 1
    assert result.rules[0].is_active is False


def test_occurrence_dates_within_window() -> None:
    """Occurrences should be listed inside the half-open window."""
    rule = _rule(RecurringFrequency.DAILY, start="2024-01-01")

    dates = occurrence_dates(
        rule,
        start=date(2024, 1, 3),
        end=date(2024, 1, 6),
    )

    assert dates == [date(2024, 1, 3), date(2024, 1, 4), date(2024, 1, 5)]
