"""Domain models for ledger records supplied by the persistence layer.

Every record is an immutable snapshot. Amounts are expected to be
non-negative ``Decimal`` values; callers own validation, the engine only
coerces numeric types.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from .dates import DateLike
from .enums import (
    PaymentMethod,
    PaymentStructure,
    RecurringFrequency,
    TaxRelevance,
    TransactionType,
)


@dataclass(frozen=True)
class Payment:
    """A payment or contribution recorded against a balance."""

    amount: Decimal
    date: DateLike
    id: str | None = None


@dataclass(frozen=True)
class Category:
    """Spending or income category."""

    id: str
    name: str
    default_tax_relevance: TaxRelevance = TaxRelevance.NONE


@dataclass(frozen=True)
class TransactionSplit:
    """Part of a split transaction attributed to one category."""

    category_id: str
    amount: Decimal


@dataclass(frozen=True)
class Transaction:
    """Income or expense entry in the ledger.

    Attributes:
        id: Transaction identifier.
        date: Calendar day of the transaction.
        amount: Total non-negative amount.
        type: Income or expense.
        category_id: Category when the transaction is not split.
        is_split: Whether the amount is spread across ``splits``.
        splits: Ordered category allocations for split transactions.
        is_tax_relevant: Whether the entry belongs in a tax summary.
    """

    id: str
    date: DateLike
    amount: Decimal
    type: TransactionType
    category_id: str | None = None
    is_split: bool = False
    splits: tuple[TransactionSplit, ...] = ()
    description: str = ""
    payment_method: PaymentMethod = PaymentMethod.OTHER
    bank_account_id: str | None = None
    credit_card_id: str | None = None
    recurring_transaction_id: str | None = None
    is_tax_relevant: bool = False


@dataclass(frozen=True)
class Budget:
    """Monthly spending limit for a category."""

    id: str
    category_id: str
    limit_amount: Decimal
    start_date: DateLike
    rollover_enabled: bool = False
    created_at: DateLike | None = None


@dataclass(frozen=True)
class Receivable:
    """Amount owed to the user by a debtor."""

    id: str
    debtor_name: str
    total_amount: Decimal
    due_date: DateLike
    payments: tuple[Payment, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class Payable:
    """Amount the user owes to a creditor."""

    id: str
    creditor_name: str
    total_amount: Decimal
    due_date: DateLike
    payments: tuple[Payment, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class LongTermLiability:
    """Loan repaid linearly by a fixed monthly payment."""

    id: str
    name: str
    original_amount: Decimal
    monthly_payment: Decimal
    payments: tuple[Payment, ...] = ()


@dataclass(frozen=True)
class ShortTermLiability:
    """Liability governed by a hard final due date.

    Installment liabilities are repaid in ``number_of_installments`` equal
    portions due on ``payment_day_of_month``.
    """

    id: str
    name: str
    original_amount: Decimal
    due_date: DateLike
    created_at: DateLike | None = None
    payment_structure: PaymentStructure = PaymentStructure.SINGLE
    number_of_installments: int | None = None
    payment_day_of_month: int | None = None
    payments: tuple[Payment, ...] = ()


@dataclass(frozen=True)
class RecurringTransactionRule:
    """Definition of a transaction that repeats on a schedule.

    Attributes:
        day_of_week: Weekday for weekly rules, 0=Sunday through 6=Saturday.
        day_of_month: Anchor day for monthly and yearly rules.
        last_processed_date: Date of the last generated occurrence.
        next_due_date: Cached next occurrence, recomputed by the scheduler.
    """

    id: str
    description: str
    amount: Decimal
    type: TransactionType
    frequency: RecurringFrequency
    start_date: DateLike
    category_id: str | None = None
    payment_method: PaymentMethod = PaymentMethod.OTHER
    bank_account_id: str | None = None
    credit_card_id: str | None = None
    end_date: DateLike | None = None
    day_of_week: int | None = None
    day_of_month: int | None = None
    last_processed_date: DateLike | None = None
    next_due_date: DateLike | None = None
    is_active: bool = True


@dataclass(frozen=True)
class FinancialGoal:
    """Savings target tracked by contributions."""

    id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: DateLike | None = None


@dataclass(frozen=True)
class BankAccount:
    """Bank account with its current balance."""

    id: str
    name: str
    current_balance: Decimal


@dataclass(frozen=True)
class CreditCard:
    """Credit card with limit, remaining availability and due day."""

    id: str
    name: str
    credit_limit: Decimal
    available_balance: Decimal
    due_day_of_month: int | None = None


@dataclass(frozen=True)
class NonCurrentAsset:
    """Long-lived asset valued at its latest known value."""

    id: str
    name: str
    acquisition_cost: Decimal
    current_value: Decimal | None = None


@dataclass(frozen=True)
class FinancialProfile:
    """User figures behind the financial health indicators.

    Attributes:
        gross_monthly_income: Income before tax; zero disables the
            debt-to-income ratio.
        emergency_fund_target_months: Months of expenses the fund covers.
        emergency_fund_account_ids: Bank account ids and/or ``"cash"``
            holding the fund.
    """

    gross_monthly_income: Decimal = Decimal("0")
    emergency_fund_target_months: int = 3
    emergency_fund_account_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class LedgerSnapshot:
    """All entity collections handed to the engine for one computation."""

    transactions: tuple[Transaction, ...] = ()
    budgets: tuple[Budget, ...] = ()
    receivables: tuple[Receivable, ...] = ()
    payables: tuple[Payable, ...] = ()
    short_term_liabilities: tuple[ShortTermLiability, ...] = ()
    long_term_liabilities: tuple[LongTermLiability, ...] = ()
    recurring_rules: tuple[RecurringTransactionRule, ...] = ()
    bank_accounts: tuple[BankAccount, ...] = ()
    credit_cards: tuple[CreditCard, ...] = ()
    goals: tuple[FinancialGoal, ...] = ()
    non_current_assets: tuple[NonCurrentAsset, ...] = ()
    categories: tuple[Category, ...] = ()
    profile: FinancialProfile = field(default_factory=FinancialProfile)


__all__ = [
    "Payment",
    "Category",
    "TransactionSplit",
    "Transaction",
    "Budget",
    "Receivable",
    "Payable",
    "LongTermLiability",
    "ShortTermLiability",
    "RecurringTransactionRule",
    "FinancialGoal",
    "BankAccount",
    "CreditCard",
    "NonCurrentAsset",
    "FinancialProfile",
    "LedgerSnapshot",
]
