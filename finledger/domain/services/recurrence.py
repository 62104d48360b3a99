"""Domain services for recurring transaction schedules.

Two explicit entry points compute occurrences: ``first_occurrence`` for a
rule that never ran and ``next_occurrence`` to advance from a processed
date. Neither reads the clock, so identical inputs always give identical
dates.
"""

from collections.abc import Collection, Iterable
from dataclasses import replace
from datetime import date, timedelta
import logging
from logging import Logger

from finledger.domain.models import (
    InvalidDate,
    MaybeDate,
    Occurrence,
    RecurringFrequency,
    RecurringProcessingResult,
    RecurringTransactionRule,
    Transaction,
)
from finledger.domain.services.date_math import (
    advance_months_anchored,
    parse_local_date,
    with_day_clamped,
)


def js_weekday(value: date) -> int:
    """Return the weekday with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7


def align_to_weekday(value: date, day_of_week: int) -> date:
    """Move forward 0 to 6 days to the next date on ``day_of_week``."""
    return value + timedelta(days=(day_of_week - js_weekday(value)) % 7)


def first_occurrence(
    rule: RecurringTransactionRule,
    *,
    logger: Logger | None = None,
) -> Occurrence:
    """Return the first occurrence of a rule that was never processed.

    Args:
        rule: Recurring rule.
        logger: Logger used for warnings.

    Returns:
        Occurrence: First date on or after the start date matching the rule.
    """
    logger = logger or logging.getLogger(__name__)
    start = parse_local_date(rule.start_date)
    if isinstance(start, InvalidDate):
        logger.warning(
            f"Recurring rule {rule.id} has an invalid start date "
            f"{rule.start_date!r}"
        )
        return Occurrence(start)
    return _apply_end_date(rule, _first_on_or_after_start(rule, start), logger)


def next_occurrence(
    rule: RecurringTransactionRule,
    last_processed_date,
    *,
    logger: Logger | None = None,
) -> Occurrence:
    """Return the occurrence following ``last_processed_date``.

    Daily rules move one day, weekly rules seven days (then forward to the
    configured weekday), monthly rules one calendar month and yearly rules
    to the start month of the following year. Monthly and yearly rules land
    on ``day_of_month``, else the start date's day, clamped to the target
    month's length. The result never precedes the start date, and an
    occurrence past the end date is replaced by the end date flagged as
    exhausted.

    Args:
        rule: Recurring rule.
        last_processed_date: Date of the last generated occurrence.
        logger: Logger used for warnings.

    Returns:
        Occurrence: Next occurrence.
    """
    logger = logger or logging.getLogger(__name__)
    start = parse_local_date(rule.start_date)
    base = parse_local_date(last_processed_date)
    if isinstance(start, InvalidDate) or isinstance(base, InvalidDate):
        logger.warning(
            f"Recurring rule {rule.id} has invalid dates: "
            f"start={rule.start_date!r}, last_processed={last_processed_date!r}"
        )
        return Occurrence(start if isinstance(start, InvalidDate) else base)

    if base < start:
        candidate = _first_on_or_after_start(rule, start)
    else:
        candidate = _advance(rule, base, start)
        if candidate < start:
            candidate = _first_on_or_after_start(rule, start)
    return _apply_end_date(rule, candidate, logger)


def compute_next_due_date(
    rule: RecurringTransactionRule,
    *,
    logger: Logger | None = None,
) -> Occurrence:
    """Return the next due occurrence from the rule's own processing state."""
    if rule.last_processed_date is None:
        return first_occurrence(rule, logger=logger)
    return next_occurrence(rule, rule.last_processed_date, logger=logger)


def resolve_due_date(
    rule: RecurringTransactionRule,
    *,
    logger: Logger | None = None,
) -> Occurrence:
    """Return the cached next due date, computing it when absent."""
    if rule.next_due_date is not None:
        return Occurrence(parse_local_date(rule.next_due_date))
    return compute_next_due_date(rule, logger=logger)


def process_due_rules(
    rules: Iterable[RecurringTransactionRule],
    *,
    as_of: date,
    selected_ids: Collection[str] | None = None,
    logger: Logger | None = None,
) -> RecurringProcessingResult:
    """Materialize the due occurrence of each active rule.

    Every active rule (restricted to ``selected_ids`` when given) whose next
    due date is on or before ``as_of`` produces one transaction dated on the
    due date, and is returned with its processing state advanced. Rules are
    never mutated; untouched rules are returned as-is.

    Args:
        rules: Recurring rules.
        as_of: Current calendar day of the computation.
        selected_ids: Optional subset of rule ids to process.
        logger: Logger used for warnings.

    Returns:
        RecurringProcessingResult: Updated rules and generated transactions.
    """
    logger = logger or logging.getLogger(__name__)
    updated: list[RecurringTransactionRule] = []
    generated: list[Transaction] = []
    for rule in rules:
        if not rule.is_active or (
            selected_ids is not None and rule.id not in selected_ids
        ):
            updated.append(rule)
            continue
        due = resolve_due_date(rule, logger=logger)
        if isinstance(due.date, InvalidDate):
            logger.warning(f"Skipping recurring rule {rule.id}: {due.date}")
            updated.append(rule)
            continue
        if due.exhausted:
            updated.append(replace(rule, next_due_date=due.date, is_active=False))
            continue
        if due.date > as_of:
            updated.append(rule)
            continue

        generated.append(_materialize(rule, due.date))
        following = next_occurrence(rule, due.date, logger=logger)
        updated.append(
            replace(
                rule,
                last_processed_date=due.date,
                next_due_date=following.date,
                is_active=not following.exhausted,
            )
        )
    return RecurringProcessingResult(
        rules=tuple(updated),
        generated_transactions=tuple(generated),
    )


def _first_on_or_after_start(
    rule: RecurringTransactionRule,
    start: date,
) -> date:
    frequency = rule.frequency
    if frequency == RecurringFrequency.DAILY:
        return start
    if frequency == RecurringFrequency.WEEKLY:
        if rule.day_of_week is None:
            return start
        return align_to_weekday(start, rule.day_of_week)
    if frequency == RecurringFrequency.MONTHLY:
        if not rule.day_of_month:
            return start
        candidate = with_day_clamped(start.year, start.month, rule.day_of_month)
        if candidate < start:
            candidate = advance_months_anchored(start, 1, rule.day_of_month)
        return candidate
    if frequency == RecurringFrequency.YEARLY:
        anchor_day = rule.day_of_month or start.day
        candidate = with_day_clamped(start.year, start.month, anchor_day)
        if candidate < start:
            candidate = with_day_clamped(start.year + 1, start.month, anchor_day)
        return candidate
    raise ValueError(f"Unsupported recurring frequency: {frequency!r}")


def _advance(
    rule: RecurringTransactionRule,
    base: date,
    start: date,
) -> date:
    frequency = rule.frequency
    if frequency == RecurringFrequency.DAILY:
        return base + timedelta(days=1)
    if frequency == RecurringFrequency.WEEKLY:
        candidate = base + timedelta(days=7)
        if rule.day_of_week is None:
            return candidate
        return align_to_weekday(candidate, rule.day_of_week)
    if frequency == RecurringFrequency.MONTHLY:
        return advance_months_anchored(base, 1, rule.day_of_month or start.day)
    if frequency == RecurringFrequency.YEARLY:
        return with_day_clamped(
            base.year + 1,
            start.month,
            rule.day_of_month or start.day,
        )
    raise ValueError(f"Unsupported recurring frequency: {frequency!r}")


def _apply_end_date(
    rule: RecurringTransactionRule,
    candidate: date,
    logger: Logger,
) -> Occurrence:
    if rule.end_date is None:
        return Occurrence(candidate)
    end = parse_local_date(rule.end_date)
    if isinstance(end, InvalidDate):
        logger.warning(
            f"Recurring rule {rule.id} has an invalid end date "
            f"{rule.end_date!r}; ignoring it"
        )
        return Occurrence(candidate)
    if candidate > end:
        return Occurrence(end, exhausted=True)
    return Occurrence(candidate)


def _materialize(rule: RecurringTransactionRule, due: date) -> Transaction:
    return Transaction(
        id=f"txn_rt_{rule.id}_{due.isoformat()}",
        date=due,
        amount=rule.amount,
        type=rule.type,
        category_id=rule.category_id,
        description=rule.description,
        payment_method=rule.payment_method,
        bank_account_id=rule.bank_account_id,
        credit_card_id=rule.credit_card_id,
        recurring_transaction_id=rule.id,
    )


def occurrence_dates(
    rule: RecurringTransactionRule,
    *,
    start: date,
    end: date,
    logger: Logger | None = None,
) -> list[date]:
    """Return the rule's occurrences within ``[start, end)``.

    Iteration begins at the rule's next due date and stops at the first
    occurrence past the window or when the rule is exhausted.
    """
    logger = logger or logging.getLogger(__name__)
    if not rule.is_active:
        return []
    occurrence = resolve_due_date(rule, logger=logger)
    dates: list[date] = []
    current: MaybeDate = occurrence.date
    exhausted = occurrence.exhausted
    while not exhausted and isinstance(current, date) and current < end:
        if current >= start:
            dates.append(current)
        following = next_occurrence(rule, current, logger=logger)
        if isinstance(following.date, InvalidDate) or following.date <= current:
            break
        current = following.date
        exhausted = following.exhausted
    return dates


__all__ = [
    "js_weekday",
    "align_to_weekday",
    "first_occurrence",
    "next_occurrence",
    "compute_next_due_date",
    "resolve_due_date",
    "process_due_rules",
    "occurrence_dates",
]
