"""Domain services for monthly budgets and rollover carry-over."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
import logging
from logging import Logger

from finledger.domain.constants import FULL_PROGRESS, NEARING_LIMIT_THRESHOLD
from finledger.domain.models import (
    Budget,
    BudgetProgressStatus,
    BudgetStatus,
    InvalidDate,
    Transaction,
    TransactionType,
)
from finledger.domain.services.date_math import (
    month_key,
    parse_local_date,
    previous_month_key,
)
from finledger.utils.decimal_utils import coerce_decimal


def compute_spent(
    category_id: str,
    year_month: tuple[int, int],
    transactions: Iterable[Transaction],
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Sum the expenses booked on a category during a month.

    Split transactions contribute only the split amounts of the category;
    unsplit transactions contribute their whole amount.

    Args:
        category_id: Category to total.
        year_month: (year, month) of the period.
        transactions: Ledger transactions.
        logger: Logger used for warnings.

    Returns:
        Decimal: Amount spent.
    """
    logger = logger or logging.getLogger(__name__)
    spent = Decimal("0")
    for transaction in transactions:
        if transaction.type != TransactionType.EXPENSE:
            continue
        booked = parse_local_date(transaction.date)
        if isinstance(booked, InvalidDate):
            logger.warning(
                f"Skipping transaction {transaction.id} with invalid date "
                f"{transaction.date!r}"
            )
            continue
        if month_key(booked) != year_month:
            continue
        if transaction.is_split:
            spent += sum(
                (
                    coerce_decimal(split.amount)
                    for split in transaction.splits
                    if split.category_id == category_id
                ),
                Decimal("0"),
            )
        elif transaction.category_id == category_id:
            spent += coerce_decimal(transaction.amount)
    return spent


def find_budget_for_month(
    category_id: str,
    year_month: tuple[int, int],
    budgets: Iterable[Budget],
    *,
    rollover_only: bool = False,
    logger: Logger | None = None,
) -> Budget | None:
    """Locate the budget of a category for a month.

    When several budgets match, the most recently created one wins
    (``created_at``, then latest ``start_date``, then highest id) and the
    ambiguity is logged.

    Args:
        category_id: Category of the budget.
        year_month: (year, month) of the period.
        budgets: Candidate budgets.
        rollover_only: Only consider budgets with rollover enabled.
        logger: Logger used for warnings.

    Returns:
        Budget | None: Matching budget, if any.
    """
    logger = logger or logging.getLogger(__name__)
    matches = _budgets_for_month(
        category_id,
        year_month,
        budgets,
        rollover_only=rollover_only,
    )
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            f"Found {len(matches)} budgets for category={category_id} "
            f"month={year_month[0]}-{year_month[1]:02d}; "
            "using the most recently created"
        )
    return max(matches, key=_recency_key)


def compute_budget_status(
    budget: Budget,
    budgets: Sequence[Budget],
    transactions: Sequence[Transaction],
    *,
    nearing_limit_threshold: Decimal = NEARING_LIMIT_THRESHOLD,
    logger: Logger | None = None,
) -> BudgetStatus:
    """Compute a budget's spending and effective limit for its month.

    With rollover enabled, the previous month's budget of the same category
    (itself rollover-enabled) passes on its remainder: its effective limit
    minus its spending. Because that predecessor's effective limit already
    contains its own carry-over, the chain is folded oldest to newest. A
    negative remainder reduces the limit, which is floored at zero. A month
    with several rollover budgets for the category ends the chain.

    Args:
        budget: Budget to evaluate.
        budgets: All budgets, used to locate predecessors.
        transactions: Ledger transactions.
        nearing_limit_threshold: Progress percentage flagged as nearing.
        logger: Logger used for warnings.

    Returns:
        BudgetStatus: Derived spending figures and status.
    """
    logger = logger or logging.getLogger(__name__)
    limit = coerce_decimal(budget.limit_amount)
    start = parse_local_date(budget.start_date)
    if isinstance(start, InvalidDate):
        logger.warning(
            f"Budget {budget.id} has an invalid start date "
            f"{budget.start_date!r}; spending not evaluated"
        )
        return _build_status(
            budget,
            Decimal("0"),
            limit,
            Decimal("0"),
            nearing_limit_threshold,
        )

    spent = compute_spent(
        budget.category_id,
        month_key(start),
        transactions,
        logger=logger,
    )
    rollover = Decimal("0")
    if budget.rollover_enabled:
        predecessors = _rollover_predecessors(budget, start, budgets, logger)
        if not predecessors:
            logger.debug(
                f"No rollover predecessor for budget {budget.id}; "
                "no carry-over applied"
            )
        for predecessor in predecessors:
            rollover = _carry_forward(predecessor, rollover, transactions, logger)

    effective_limit = max(Decimal("0"), limit + rollover)
    return _build_status(
        budget,
        spent,
        effective_limit,
        rollover,
        nearing_limit_threshold,
    )


def compute_budget_chain(
    budgets: Sequence[Budget],
    transactions: Sequence[Transaction],
    *,
    nearing_limit_threshold: Decimal = NEARING_LIMIT_THRESHOLD,
    logger: Logger | None = None,
) -> list[BudgetStatus]:
    """Compute every budget oldest to newest and return them newest first."""
    ordered = sorted(budgets, key=_start_key)
    statuses = [
        compute_budget_status(
            budget,
            budgets,
            transactions,
            nearing_limit_threshold=nearing_limit_threshold,
            logger=logger,
        )
        for budget in ordered
    ]
    statuses.reverse()
    return statuses


def classify_progress(
    spent: Decimal,
    effective_limit: Decimal,
    *,
    nearing_limit_threshold: Decimal = NEARING_LIMIT_THRESHOLD,
) -> tuple[Decimal, BudgetProgressStatus]:
    """Return the progress percentage and status of a budget."""
    if effective_limit > 0:
        progress = min(FULL_PROGRESS, spent / effective_limit * 100)
    elif spent > 0:
        progress = FULL_PROGRESS
    else:
        progress = Decimal("0")

    if spent > effective_limit:
        status = BudgetProgressStatus.OVERSPENT
    elif progress >= nearing_limit_threshold:
        status = BudgetProgressStatus.NEARING_LIMIT
    elif progress > 0 or spent > 0:
        status = BudgetProgressStatus.ON_TRACK
    else:
        status = BudgetProgressStatus.NOT_STARTED
    return progress, status


def _build_status(
    budget: Budget,
    spent: Decimal,
    effective_limit: Decimal,
    rollover: Decimal,
    nearing_limit_threshold: Decimal,
) -> BudgetStatus:
    progress, status = classify_progress(
        spent,
        effective_limit,
        nearing_limit_threshold=nearing_limit_threshold,
    )
    return BudgetStatus(
        budget=budget,
        spent=spent,
        effective_limit=effective_limit,
        rollover_amount_applied=rollover,
        progress=progress,
        status=status,
    )


def _rollover_predecessors(
    budget: Budget,
    start: date,
    budgets: Sequence[Budget],
    logger: Logger,
) -> list[Budget]:
    """Return consecutive rollover predecessors, oldest first."""
    chain: list[Budget] = []
    seen = {budget.id}
    current_start = start
    while True:
        year_month = previous_month_key(current_start)
        candidates = _budgets_for_month(
            budget.category_id,
            year_month,
            budgets,
            rollover_only=True,
        )
        if len(candidates) > 1:
            logger.warning(
                f"Found {len(candidates)} rollover budgets for "
                f"category={budget.category_id} "
                f"month={year_month[0]}-{year_month[1]:02d}; "
                "no carry-over applied from that month"
            )
            break
        if not candidates or candidates[0].id in seen:
            break
        predecessor = candidates[0]
        chain.append(predecessor)
        seen.add(predecessor.id)
        current_start = parse_local_date(predecessor.start_date)
    chain.reverse()
    return chain


def _carry_forward(
    predecessor: Budget,
    carried_in: Decimal,
    transactions: Sequence[Transaction],
    logger: Logger,
) -> Decimal:
    """Return the remainder a predecessor passes to the next month."""
    start = parse_local_date(predecessor.start_date)
    spent = compute_spent(
        predecessor.category_id,
        month_key(start),
        transactions,
        logger=logger,
    )
    effective_limit = max(
        Decimal("0"),
        coerce_decimal(predecessor.limit_amount) + carried_in,
    )
    return effective_limit - spent


def _budgets_for_month(
    category_id: str,
    year_month: tuple[int, int],
    budgets: Iterable[Budget],
    *,
    rollover_only: bool,
) -> list[Budget]:
    matches = []
    for budget in budgets:
        if budget.category_id != category_id:
            continue
        if rollover_only and not budget.rollover_enabled:
            continue
        start = parse_local_date(budget.start_date)
        if isinstance(start, InvalidDate) or month_key(start) != year_month:
            continue
        matches.append(budget)
    return matches


def _start_key(budget: Budget) -> date:
    start = parse_local_date(budget.start_date)
    return date.max if isinstance(start, InvalidDate) else start


def _recency_key(budget: Budget) -> tuple[date, date, str]:
    created = parse_local_date(budget.created_at)
    created_key = date.min if isinstance(created, InvalidDate) else created
    return created_key, _start_key(budget), budget.id


__all__ = [
    "compute_spent",
    "find_budget_for_month",
    "compute_budget_status",
    "compute_budget_chain",
    "classify_progress",
]
