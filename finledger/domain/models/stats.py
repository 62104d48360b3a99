"""Domain models for derived ledger state."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .dates import MaybeDate
from .enums import (
    BudgetProgressStatus,
    ObligationStatus,
    ReminderKind,
    ShortTermLiabilityStatus,
)
from .ledger import Budget, RecurringTransactionRule, Transaction


@dataclass(frozen=True)
class ObligationStats:
    """Paid, remaining and status figures of a receivable or payable."""

    paid: Decimal
    remaining: Decimal
    status: ObligationStatus


@dataclass(frozen=True)
class InstallmentTally:
    """Running result of attributing payments to equal installments.

    Attributes:
        count: Installments fully covered so far.
        remainder: Paid amount carried towards the next installment.
    """

    count: int
    remainder: Decimal


@dataclass(frozen=True)
class ShortTermLiabilityStats:
    """Derived state of a short-term liability."""

    paid: Decimal
    remaining: Decimal
    status: ShortTermLiabilityStatus
    installments_paid_count: int = 0
    monthly_installment_amount: Decimal | None = None
    next_installment_due_date: date | None = None
    is_installment_overdue: bool = False
    estimated_months_to_payoff: int | None = None


@dataclass(frozen=True)
class LongTermLiabilityStats:
    """Linear payoff progress of a long-term liability."""

    total_paid: Decimal
    remaining_balance: Decimal
    payments_made_count: int
    estimated_months_to_payoff: int


@dataclass(frozen=True)
class PayoffEstimate:
    """Effect of an extra monthly payment on the payoff horizon.

    Attributes:
        original_months: Months left at the regular payment, or None when
            there is no regular payment.
        new_months: Months left with the extra payment added.
        months_saved: Difference between both horizons, never negative.
    """

    original_months: int | None
    new_months: int
    months_saved: int


@dataclass(frozen=True)
class BudgetStatus:
    """Spending figures of a budget for its month."""

    budget: Budget
    spent: Decimal
    effective_limit: Decimal
    rollover_amount_applied: Decimal
    progress: Decimal
    status: BudgetProgressStatus

    @property
    def remaining(self) -> Decimal:
        """Return the effective limit minus the amount spent."""
        return self.effective_limit - self.spent

    @property
    def status_text(self) -> str:
        """Return the display label of the status."""
        return self.status.value


@dataclass(frozen=True)
class Occurrence:
    """Next occurrence of a recurring rule.

    Attributes:
        date: Occurrence date, or an InvalidDate when the rule is malformed.
        exhausted: True when the end date was reached and ``date`` is the
            rule's end date used as a terminal marker.
    """

    date: MaybeDate
    exhausted: bool = False


@dataclass(frozen=True)
class RecurringProcessingResult:
    """Outcome of materializing due recurring rules."""

    rules: tuple[RecurringTransactionRule, ...]
    generated_transactions: tuple[Transaction, ...]

    @property
    def processed_count(self) -> int:
        """Return the number of generated transactions."""
        return len(self.generated_transactions)


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a savings goal."""

    progress: Decimal
    remaining: Decimal
    is_achieved: bool


@dataclass(frozen=True)
class GoalProjection:
    """Projected completion of a goal at a steady monthly contribution."""

    months_to_goal: int
    projected_date: date
    meets_deadline: bool | None


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset balances.
        liability_total: Sum of liability balances.
        net_worth: Assets minus liabilities.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class Reminder:
    """Upcoming obligation surfaced on the dashboard."""

    kind: ReminderKind
    source_id: str
    name: str
    due_date: date
    amount: Decimal | None = None
    is_due: bool = False


__all__ = [
    "ObligationStats",
    "InstallmentTally",
    "ShortTermLiabilityStats",
    "LongTermLiabilityStats",
    "PayoffEstimate",
    "BudgetStatus",
    "Occurrence",
    "RecurringProcessingResult",
    "GoalProgress",
    "GoalProjection",
    "NetWorthSummary",
    "Reminder",
]
