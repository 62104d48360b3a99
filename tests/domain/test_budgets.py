"""Tests for budget spending and rollover."""

from decimal import Decimal
from unittest.mock import MagicMock

from finledger.domain.models import (
    Budget,
    BudgetProgressStatus,
    Transaction,
    TransactionSplit,
    TransactionType,
)
from finledger.domain.services.budgets import (
    classify_progress,
    compute_budget_chain,
    compute_budget_status,
    compute_spent,
    find_budget_for_month,
)


def _expense(txn_id: str, day: str, amount: str, category="food"):
    return Transaction(
        id=txn_id,
        date=day,
        amount=Decimal(amount),
        type=TransactionType.EXPENSE,
        category_id=category,
    )


def _budget(budget_id: str, start: str, limit="1000", rollover=True, **kwargs):
    return Budget(
        id=budget_id,
        category_id="food",
        limit_amount=Decimal(limit),
        start_date=start,
        rollover_enabled=rollover,
        **kwargs,
    )


def test_compute_spent_uses_split_amounts_and_ignores_income() -> None:
    """Only expense amounts booked on the category should count."""
    transactions = [
        _expense("t1", "2024-01-03", "40"),
        _expense("t2", "2024-01-31", "10"),
        _expense("t3", "2024-02-01", "99"),
        _expense("t4", "2024-01-10", "25", category="rent"),
        Transaction(
            id="t5",
            date="2024-01-12",
            amount=Decimal("100"),
            type=TransactionType.EXPENSE,
            is_split=True,
            splits=(
                TransactionSplit("food", Decimal("30")),
                TransactionSplit("home", Decimal("70")),
            ),
        ),
        Transaction(
            id="t6",
            date="2024-01-15",
            amount=Decimal("500"),
            type=TransactionType.INCOME,
            category_id="food",
        ),
    ]

    assert compute_spent("food", (2024, 1), transactions) == Decimal("80")


def test_compute_spent_skips_invalid_dates_with_warning() -> None:
    """Transactions with unparseable dates should be ignored."""
    logger = MagicMock()

    spent = compute_spent(
        "food",
        (2024, 1),
        [_expense("t1", "garbage", "40"), _expense("t2", "2024-01-02", "5")],
        logger=logger,
    )

    assert spent == Decimal("5")
    logger.warning.assert_called_once()


def test_surplus_rolls_into_next_month() -> None:
    """January's 300 surplus should raise February's limit to 1300."""
    january = _budget("jan", "2024-01-01")
    february = _budget("feb", "2024-02-01")
    transactions = [_expense("t1", "2024-01-15", "700")]

    status = compute_budget_status(
        february,
        [january, february],
        transactions,
    )

    assert status.rollover_amount_applied == Decimal("300")
    assert status.effective_limit == Decimal("1300")
    assert status.spent == Decimal("0")
    assert status.status == BudgetProgressStatus.NOT_STARTED
    assert status.remaining == Decimal("1300")


def test_three_month_chain_carries_adjusted_remainder() -> None:
    """March should inherit February's remainder after January's carry."""
    budgets = [
        _budget("jan", "2024-01-01"),
        _budget("feb", "2024-02-01"),
        _budget("mar", "2024-03-01"),
    ]
    transactions = [
        _expense("t1", "2024-01-15", "700"),
        _expense("t2", "2024-02-15", "1100"),
    ]

    february = compute_budget_status(budgets[1], budgets, transactions)
    march = compute_budget_status(budgets[2], budgets, transactions)

    assert february.effective_limit == Decimal("1300")
    assert february.status == BudgetProgressStatus.ON_TRACK
    assert march.rollover_amount_applied == Decimal("200")
    assert march.effective_limit == Decimal("1200")


def test_chain_stops_at_non_rollover_predecessor() -> None:
    """A predecessor without rollover should not pass anything on."""
    budgets = [
        _budget("jan", "2024-01-01", rollover=False),
        _budget("feb", "2024-02-01"),
    ]
    transactions = [_expense("t1", "2024-01-15", "100")]

    status = compute_budget_status(budgets[1], budgets, transactions)

    assert status.rollover_amount_applied == Decimal("0")
    assert status.effective_limit == Decimal("1000")


def test_deficit_reduces_limit_with_zero_floor() -> None:
    """Deficits lower the limit, which never goes below zero."""
    budgets = [
        _budget("jan", "2024-01-01", limit="100"),
        _budget("feb", "2024-02-01"),
    ]
    transactions = [
        _expense("t1", "2024-01-15", "2000"),
        _expense("t2", "2024-02-03", "10"),
    ]

    status = compute_budget_status(budgets[1], budgets, transactions)

    assert status.rollover_amount_applied == Decimal("-1900")
    assert status.effective_limit == Decimal("0")
    assert status.progress == Decimal("100")
    assert status.status == BudgetProgressStatus.OVERSPENT


def test_disabled_rollover_ignores_previous_month() -> None:
    """Budgets without rollover should use their own limit."""
    budgets = [
        _budget("jan", "2024-01-01"),
        _budget("feb", "2024-02-01", rollover=False),
    ]

    status = compute_budget_status(budgets[1], budgets, [])

    assert status.rollover_amount_applied == Decimal("0")
    assert status.effective_limit == Decimal("1000")


def test_duplicate_budgets_resolve_to_most_recent() -> None:
    """The most recently created budget should win and be logged."""
    logger = MagicMock()
    older = _budget("old", "2024-01-01", created_at="2023-12-01")
    newer = _budget("new", "2024-01-01", created_at="2023-12-20")

    found = find_budget_for_month(
        "food",
        (2024, 1),
        [newer, older],
        logger=logger,
    )

    assert found is newer
    logger.warning.assert_called_once()


def test_duplicate_rollover_predecessors_apply_no_carry() -> None:
    """Two rollover budgets in the previous month should carry nothing."""
    logger = MagicMock()
    budgets = [
        _budget("jan-a", "2024-01-01", created_at="2023-12-01"),
        _budget(
            "jan-b",
            "2024-01-01",
            limit="500",
            created_at="2023-12-20",
        ),
        _budget("feb", "2024-02-01"),
    ]
    transactions = [_expense("t1", "2024-01-10", "100")]

    status = compute_budget_status(
        budgets[2],
        budgets,
        transactions,
        logger=logger,
    )

    assert status.rollover_amount_applied == Decimal("0")
    assert status.effective_limit == Decimal("1000")
    logger.warning.assert_called_once()


def test_classify_progress_thresholds() -> None:
    """Progress classification should follow the status precedence."""
    assert classify_progress(Decimal("95"), Decimal("100")) == (
        Decimal("95"),
        BudgetProgressStatus.NEARING_LIMIT,
    )
    assert classify_progress(Decimal("150"), Decimal("100"))[1] == (
        BudgetProgressStatus.OVERSPENT
    )
    assert classify_progress(Decimal("10"), Decimal("100"))[1] == (
        BudgetProgressStatus.ON_TRACK
    )
    assert classify_progress(Decimal("0"), Decimal("0")) == (
        Decimal("0"),
        BudgetProgressStatus.NOT_STARTED,
    )
    assert classify_progress(
        Decimal("50"),
        Decimal("100"),
        nearing_limit_threshold=Decimal("50"),
    )[1] == BudgetProgressStatus.NEARING_LIMIT


def test_budget_chain_is_returned_newest_first() -> None:
    """Batch computation should list the latest month first."""
    budgets = [
        _budget("mar", "2024-03-01"),
        _budget("jan", "2024-01-01"),
        _budget("feb", "2024-02-01"),
    ]

    statuses = compute_budget_chain(budgets, [])

    assert [status.budget.id for status in statuses] == ["mar", "feb", "jan"]
    assert statuses[0].effective_limit == Decimal("3000")


def test_invalid_start_date_is_degraded_and_logged() -> None:
    """A budget with an unparseable start date should not crash."""
    logger = MagicMock()
    budget = _budget("bad", "January")

    status = compute_budget_status(budget, [budget], [], logger=logger)

    assert status.spent == Decimal("0")
    assert status.effective_limit == Decimal("1000")
    logger.warning.assert_called_once()
