"""Domain services for dashboard summaries derived from transactions."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
import logging
from logging import Logger

from finledger.domain.constants import (
    AVERAGE_EXPENSE_MONTHS,
    CASH_ACCOUNT_ID,
    CASH_TO_BANK_CATEGORY_ID,
    FULL_PROGRESS,
    UNCATEGORIZED_NAME,
    UNKNOWN_CATEGORY_NAME,
)
from finledger.domain.models import (
    BankAccount,
    Category,
    CategoryTotal,
    EmergencyFundProgress,
    FinancialHealth,
    FinancialProfile,
    InvalidDate,
    LongTermLiability,
    PaymentMethod,
    PaymentStructure,
    ShortTermLiability,
    Transaction,
    TransactionType,
)
from finledger.domain.services.date_math import (
    advance_months_anchored,
    month_key,
    parse_local_date,
)
from finledger.domain.services.installments import (
    compute_short_term_liability_stats,
)
from finledger.utils.decimal_utils import coerce_decimal, sum_decimals


def compute_cash_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Return cash in hand from cash-settled transactions.

    Cash income adds to the balance and cash expenses subtract from it.
    Deposits of cash into a bank recorded with another payment method are
    subtracted as well, so each deposit leaves the balance exactly once.
    """
    balance = Decimal("0")
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.payment_method == PaymentMethod.CASH:
            if transaction.type == TransactionType.INCOME:
                balance += amount
            else:
                balance -= amount
        elif (
            transaction.category_id == CASH_TO_BANK_CATEGORY_ID
            and transaction.type == TransactionType.EXPENSE
        ):
            balance -= amount
    return balance


def category_name(
    category_id: str | None,
    categories: Iterable[Category],
) -> str:
    """Return a category's display name."""
    if not category_id:
        return UNCATEGORIZED_NAME
    for category in categories:
        if category.id == category_id:
            return category.name
    return UNKNOWN_CATEGORY_NAME


def compute_expense_breakdown(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    *,
    start: date,
    end: date,
    logger: Logger | None = None,
) -> list[CategoryTotal]:
    """Total expenses per category between ``start`` and ``end`` inclusive.

    Split transactions contribute each split to its own category.

    Args:
        transactions: Ledger transactions.
        categories: Known categories, used for display names.
        start: First day of the period.
        end: Last day of the period.
        logger: Logger used for warnings.

    Returns:
        list[CategoryTotal]: Totals, largest first.
    """
    logger = logger or logging.getLogger(__name__)
    categories = list(categories)
    amounts: dict[str, Decimal] = {}
    members: dict[str, list[Transaction]] = {}

    def _add(category_id: str, amount, transaction: Transaction) -> None:
        amounts[category_id] = (
            amounts.get(category_id, Decimal("0")) + coerce_decimal(amount)
        )
        bucket = members.setdefault(category_id, [])
        if transaction not in bucket:
            bucket.append(transaction)

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
        if not start <= booked <= end:
            continue
        if transaction.is_split:
            for split in transaction.splits:
                _add(split.category_id, split.amount, transaction)
        elif transaction.category_id:
            _add(transaction.category_id, transaction.amount, transaction)

    totals = [
        CategoryTotal(
            category_id=category_id,
            category_name=category_name(category_id, categories),
            total_amount=amount,
            transactions=tuple(members[category_id]),
        )
        for category_id, amount in amounts.items()
    ]
    totals.sort(key=lambda item: (-item.total_amount, item.category_id))
    return totals


def compute_financial_health(
    transactions: Iterable[Transaction],
    *,
    as_of: date,
    profile: FinancialProfile,
    bank_accounts: Iterable[BankAccount] = (),
    cash_balance: Decimal = Decimal("0"),
    long_term_liabilities: Iterable[LongTermLiability] = (),
    short_term_liabilities: Iterable[ShortTermLiability] = (),
    logger: Logger | None = None,
) -> FinancialHealth:
    """Compute the dashboard's financial health indicators.

    Income and expenses cover the calendar month of ``as_of``. The average
    monthly expenses span that month and the preceding ones, empty months
    included. The emergency fund target is that average times the target
    months; the fund holds the selected bank accounts plus cash when
    ``"cash"`` is selected. Debt service is every long-term monthly payment
    plus the installment of every installment liability.

    Args:
        transactions: Ledger transactions.
        as_of: Current calendar day of the computation.
        profile: User figures for the fund and the debt ratio.
        bank_accounts: Bank accounts.
        cash_balance: Cash in hand.
        long_term_liabilities: Long-term liabilities.
        short_term_liabilities: Short-term liabilities.
        logger: Logger used for warnings.

    Returns:
        FinancialHealth: Health indicators for the month.
    """
    logger = logger or logging.getLogger(__name__)
    current_month = month_key(as_of)
    window = [
        month_key(advance_months_anchored(as_of, -offset, 1))
        for offset in range(AVERAGE_EXPENSE_MONTHS)
    ]
    income = Decimal("0")
    expenses_by_month = {key: Decimal("0") for key in window}

    for transaction in transactions:
        booked = parse_local_date(transaction.date)
        if isinstance(booked, InvalidDate):
            logger.warning(
                f"Skipping transaction {transaction.id} with invalid date "
                f"{transaction.date!r}"
            )
            continue
        key = month_key(booked)
        amount = coerce_decimal(transaction.amount)
        if transaction.type == TransactionType.INCOME:
            if key == current_month:
                income += amount
        elif key in expenses_by_month:
            expenses_by_month[key] += amount

    expenses = expenses_by_month[current_month]
    savings_rate = (
        Decimal("0") if income == 0 else (income - expenses) / income * 100
    )
    average = sum(expenses_by_month.values(), Decimal("0")) / len(window)

    return FinancialHealth(
        month=current_month,
        income=income,
        expenses=expenses,
        savings_rate=savings_rate,
        average_monthly_expenses=average,
        emergency_fund=_emergency_fund(
            profile,
            average,
            bank_accounts,
            cash_balance,
        ),
        debt_to_income_ratio=_debt_to_income(
            profile,
            long_term_liabilities,
            short_term_liabilities,
            as_of,
            logger,
        ),
    )


def _emergency_fund(
    profile: FinancialProfile,
    average_expenses: Decimal,
    bank_accounts: Iterable[BankAccount],
    cash_balance: Decimal,
) -> EmergencyFundProgress:
    selected = set(profile.emergency_fund_account_ids)
    target = profile.emergency_fund_target_months * average_expenses
    current = sum_decimals(
        account.current_balance
        for account in bank_accounts
        if account.id in selected
    )
    if CASH_ACCOUNT_ID in selected:
        current += coerce_decimal(cash_balance)
    if target > 0:
        progress = min(FULL_PROGRESS, current / target * 100)
    elif current > 0:
        progress = FULL_PROGRESS
    else:
        progress = Decimal("0")
    return EmergencyFundProgress(
        target=target,
        current=current,
        progress=progress,
    )


def _debt_to_income(
    profile: FinancialProfile,
    long_term_liabilities: Iterable[LongTermLiability],
    short_term_liabilities: Iterable[ShortTermLiability],
    as_of: date,
    logger: Logger,
) -> Decimal | None:
    gross = coerce_decimal(profile.gross_monthly_income)
    if gross <= 0:
        return None
    debt = sum_decimals(
        liability.monthly_payment for liability in long_term_liabilities
    )
    for liability in short_term_liabilities:
        if liability.payment_structure != PaymentStructure.INSTALLMENTS:
            continue
        stats = compute_short_term_liability_stats(
            liability,
            as_of=as_of,
            logger=logger,
        )
        if stats.monthly_installment_amount:
            debt += stats.monthly_installment_amount
    return debt / gross * 100


__all__ = [
    "compute_cash_balance",
    "category_name",
    "compute_expense_breakdown",
    "compute_financial_health",
]
