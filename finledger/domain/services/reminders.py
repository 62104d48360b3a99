"""Domain services for upcoming payment reminders."""

from collections.abc import Iterable
from datetime import date, timedelta
import logging
from logging import Logger

from finledger.domain.constants import DEFAULT_REMINDER_DAYS
from finledger.domain.models import (
    CreditCard,
    InvalidDate,
    RecurringTransactionRule,
    Reminder,
    ReminderKind,
    ShortTermLiability,
    ShortTermLiabilityStatus,
)
from finledger.domain.services.date_math import advance_months_anchored
from finledger.domain.services.installments import (
    compute_short_term_liability_stats,
)
from finledger.domain.services.recurrence import resolve_due_date
from finledger.utils.decimal_utils import coerce_decimal


def collect_reminders(
    *,
    rules: Iterable[RecurringTransactionRule] = (),
    short_term_liabilities: Iterable[ShortTermLiability] = (),
    credit_cards: Iterable[CreditCard] = (),
    as_of: date,
    window_days: int = DEFAULT_REMINDER_DAYS,
    logger: Logger | None = None,
) -> list[Reminder]:
    """Return everything due on or before ``as_of + window_days``.

    Overdue recurring rules and installments are included and flagged as
    due. Credit cards are reminded of their next due day from ``as_of``.

    Args:
        rules: Recurring rules.
        short_term_liabilities: Short-term liabilities.
        credit_cards: Credit cards.
        as_of: Current calendar day of the computation.
        window_days: Look-ahead window in days.
        logger: Logger used for warnings.

    Returns:
        list[Reminder]: Reminders sorted by due date.
    """
    logger = logger or logging.getLogger(__name__)
    horizon = as_of + timedelta(days=window_days)
    reminders: list[Reminder] = []

    for rule in rules:
        if not rule.is_active:
            continue
        occurrence = resolve_due_date(rule, logger=logger)
        due = occurrence.date
        if occurrence.exhausted or isinstance(due, InvalidDate) or due > horizon:
            continue
        reminders.append(
            Reminder(
                kind=ReminderKind.RECURRING,
                source_id=rule.id,
                name=rule.description,
                due_date=due,
                amount=coerce_decimal(rule.amount),
                is_due=due <= as_of,
            )
        )

    for liability in short_term_liabilities:
        stats = compute_short_term_liability_stats(
            liability,
            as_of=as_of,
            logger=logger,
        )
        due = stats.next_installment_due_date
        if (
            due is None
            or stats.status == ShortTermLiabilityStatus.PAID
            or due > horizon
        ):
            continue
        reminders.append(
            Reminder(
                kind=ReminderKind.INSTALLMENT,
                source_id=liability.id,
                name=liability.name,
                due_date=due,
                amount=stats.monthly_installment_amount,
                is_due=due <= as_of,
            )
        )

    for card in credit_cards:
        if not card.due_day_of_month:
            continue
        due = advance_months_anchored(as_of, 0, card.due_day_of_month)
        if due < as_of:
            due = advance_months_anchored(as_of, 1, card.due_day_of_month)
        if due > horizon:
            continue
        used = coerce_decimal(card.credit_limit) - coerce_decimal(
            card.available_balance
        )
        reminders.append(
            Reminder(
                kind=ReminderKind.CREDIT_CARD,
                source_id=card.id,
                name=card.name,
                due_date=due,
                amount=used if used > 0 else None,
                is_due=due == as_of,
            )
        )

    reminders.sort(key=lambda item: (item.due_date, item.kind.value, item.name))
    return reminders


__all__ = ["collect_reminders"]
