"""Domain services for the day-by-day cash flow projection."""

from collections import defaultdict
from collections.abc import Collection, Iterable, Iterator
from datetime import date, timedelta
from decimal import Decimal
import logging
from logging import Logger

from finledger.domain.constants import CASH_ACCOUNT_ID
from finledger.domain.models import (
    CashFlowEvent,
    CreditCard,
    DailyCashFlowProjection,
    FlowDirection,
    InvalidDate,
    Payable,
    PaymentMethod,
    PaymentStructure,
    ProjectionEvent,
    Receivable,
    RecurringTransactionRule,
    ShortTermLiability,
    ShortTermLiabilityStatus,
    TransactionType,
)
from finledger.domain.services.date_math import (
    advance_months_anchored,
    iter_days,
    parse_local_date,
)
from finledger.domain.services.installments import (
    compute_short_term_liability_stats,
)
from finledger.domain.services.obligations import (
    compute_payable_stats,
    compute_receivable_stats,
)
from finledger.domain.services.recurrence import occurrence_dates
from finledger.utils.decimal_utils import coerce_decimal


def iter_cash_flow(
    starting_balance: Decimal,
    events: Iterable[CashFlowEvent],
    *,
    as_of: date,
    horizon_days: int,
) -> Iterator[DailyCashFlowProjection]:
    """Yield one projected day at a time over ``[as_of, as_of + horizon)``.

    Each day starts from the previous day's closing balance, the first one
    from ``starting_balance``. Events on that day are applied in their
    input order; positive amounts are inflows, negative ones outflows.
    """
    by_day: dict[date, list[CashFlowEvent]] = defaultdict(list)
    for event in events:
        by_day[event.date].append(event)

    balance = coerce_decimal(starting_balance)
    for day in iter_days(as_of, horizon_days):
        todays = by_day.get(day, [])
        applied = tuple(_to_projection_event(event) for event in todays)
        net = sum(
            (coerce_decimal(event.amount) for event in todays),
            Decimal("0"),
        )
        end_balance = balance + net
        yield DailyCashFlowProjection(
            date=day,
            start_of_day_balance=balance,
            events=applied,
            end_of_day_balance=end_balance,
        )
        balance = end_balance


def project_cash_flow(
    starting_balance: Decimal,
    events: Iterable[CashFlowEvent],
    *,
    as_of: date,
    horizon_days: int,
) -> list[DailyCashFlowProjection]:
    """Return the materialized projection, one entry per day.

    Args:
        starting_balance: Balance at the start of ``as_of``.
        events: Known future events from every source.
        as_of: First projected day.
        horizon_days: Number of days to project; non-positive yields none.

    Returns:
        list[DailyCashFlowProjection]: Ordered daily projections.
    """
    return list(
        iter_cash_flow(
            starting_balance,
            events,
            as_of=as_of,
            horizon_days=horizon_days,
        )
    )


def recurring_events(
    rules: Iterable[RecurringTransactionRule],
    *,
    as_of: date,
    horizon_days: int,
    account_ids: Collection[str] = (),
    logger: Logger | None = None,
) -> list[CashFlowEvent]:
    """Return occurrences of recurring rules touching the selected accounts.

    A rule touches the selection when its bank account is selected, or when
    it is settled in cash and the cash pseudo-account is selected.
    """
    end = as_of + timedelta(days=max(0, horizon_days))
    events: list[CashFlowEvent] = []
    for rule in rules:
        if not _touches_accounts(rule, account_ids):
            continue
        amount = coerce_decimal(rule.amount)
        signed = amount if rule.type == TransactionType.INCOME else -amount
        for day in occurrence_dates(rule, start=as_of, end=end, logger=logger):
            events.append(CashFlowEvent(day, signed, rule.description))
    return events


def installment_events(
    liabilities: Iterable[ShortTermLiability],
    *,
    as_of: date,
    logger: Logger | None = None,
) -> list[CashFlowEvent]:
    """Return the next payment due on each unpaid short-term liability.

    Installment liabilities contribute their next installment, capped at the
    remaining balance; single-payment liabilities contribute the remaining
    balance on the final due date.
    """
    logger = logger or logging.getLogger(__name__)
    events: list[CashFlowEvent] = []
    for liability in liabilities:
        stats = compute_short_term_liability_stats(
            liability,
            as_of=as_of,
            logger=logger,
        )
        if stats.status == ShortTermLiabilityStatus.PAID or stats.remaining <= 0:
            continue
        if (
            stats.next_installment_due_date is not None
            and stats.monthly_installment_amount is not None
        ):
            amount = min(stats.monthly_installment_amount, stats.remaining)
            events.append(
                CashFlowEvent(
                    stats.next_installment_due_date,
                    -amount,
                    f"Installment: {liability.name}",
                )
            )
        elif liability.payment_structure == PaymentStructure.SINGLE:
            due = parse_local_date(liability.due_date)
            if isinstance(due, InvalidDate):
                continue
            events.append(
                CashFlowEvent(due, -stats.remaining, f"Liability: {liability.name}")
            )
    return events


def credit_card_due_events(
    cards: Iterable[CreditCard],
    *,
    as_of: date,
    horizon_days: int,
) -> list[CashFlowEvent]:
    """Return card repayments of the used balance on each due day in range."""
    end = as_of + timedelta(days=max(0, horizon_days))
    events: list[CashFlowEvent] = []
    for card in cards:
        if not card.due_day_of_month:
            continue
        used = coerce_decimal(card.credit_limit) - coerce_decimal(
            card.available_balance
        )
        if used <= 0:
            continue
        offset = 0
        due = advance_months_anchored(as_of, offset, card.due_day_of_month)
        while due < end:
            if due >= as_of:
                events.append(
                    CashFlowEvent(due, -used, f"Credit card due: {card.name}")
                )
                # The used balance is repaid once within the horizon.
                break
            offset += 1
            due = advance_months_anchored(as_of, offset, card.due_day_of_month)
    return events


def obligation_events(
    receivables: Iterable[Receivable],
    payables: Iterable[Payable],
    *,
    as_of: date,
    logger: Logger | None = None,
) -> list[CashFlowEvent]:
    """Return outstanding receivables and payables on their due dates."""
    events: list[CashFlowEvent] = []
    for receivable in receivables:
        stats = compute_receivable_stats(receivable, as_of=as_of, logger=logger)
        due = parse_local_date(receivable.due_date)
        if stats.remaining <= 0 or isinstance(due, InvalidDate):
            continue
        events.append(
            CashFlowEvent(
                due,
                stats.remaining,
                f"Receivable: {receivable.debtor_name}",
            )
        )
    for payable in payables:
        stats = compute_payable_stats(payable, as_of=as_of, logger=logger)
        due = parse_local_date(payable.due_date)
        if stats.remaining <= 0 or isinstance(due, InvalidDate):
            continue
        events.append(
            CashFlowEvent(
                due,
                -stats.remaining,
                f"Payable: {payable.creditor_name}",
            )
        )
    return events


def _to_projection_event(event: CashFlowEvent) -> ProjectionEvent:
    amount = coerce_decimal(event.amount)
    direction = FlowDirection.INFLOW if amount >= 0 else FlowDirection.OUTFLOW
    return ProjectionEvent(
        description=event.description,
        amount=abs(amount),
        direction=direction,
    )


def _touches_accounts(
    rule: RecurringTransactionRule,
    account_ids: Collection[str],
) -> bool:
    if rule.bank_account_id and rule.bank_account_id in account_ids:
        return True
    return (
        rule.payment_method == PaymentMethod.CASH
        and CASH_ACCOUNT_ID in account_ids
    )


__all__ = [
    "iter_cash_flow",
    "project_cash_flow",
    "recurring_events",
    "installment_events",
    "credit_card_due_events",
    "obligation_events",
]
