"""Closed enumerations for ledger entities and derived statuses."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a ledger transaction."""

    INCOME = "Income"
    EXPENSE = "Expense"


class PaymentMethod(str, Enum):
    """How a transaction or payment was settled."""

    CASH = "Cash"
    CHEQUE = "Cheque"
    BANK_TRANSFER = "Bank Transfer"
    CREDIT_CARD = "Credit Card"
    OTHER = "Other"


class RecurringFrequency(str, Enum):
    """Supported recurrence frequencies."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


class PaymentStructure(str, Enum):
    """Repayment structure of a short-term liability."""

    SINGLE = "Single Payment"
    INSTALLMENTS = "Installments"


class ObligationStatus(str, Enum):
    """Derived status of a receivable or payable.

    UNKNOWN is reported when the due date cannot be parsed and the
    obligation is not already settled.
    """

    PENDING = "Pending"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"
    OVERDUE = "Overdue"
    UNKNOWN = "Unknown"


class ShortTermLiabilityStatus(str, Enum):
    """Derived status of a short-term liability."""

    UPCOMING = "Upcoming"
    PENDING = "Pending"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"
    OVERDUE = "Overdue"
    UNKNOWN = "Unknown"


class BudgetProgressStatus(str, Enum):
    """Consumption level of a budget for its month."""

    OVERSPENT = "Overspent"
    NEARING_LIMIT = "Nearing Limit"
    ON_TRACK = "On Track"
    NOT_STARTED = "Not Started"


class FlowDirection(str, Enum):
    """Direction of a projected cash event."""

    INFLOW = "inflow"
    OUTFLOW = "outflow"


class TaxRelevance(str, Enum):
    """How a category's transactions count towards a tax year."""

    INCOME = "income"
    DEDUCTION = "deduction"
    NONE = "none"


class ReminderKind(str, Enum):
    """Source of an upcoming reminder."""

    RECURRING = "Recurring Transaction"
    INSTALLMENT = "Installment Due"
    CREDIT_CARD = "Credit Card Due"


__all__ = [
    "TransactionType",
    "PaymentMethod",
    "RecurringFrequency",
    "PaymentStructure",
    "ObligationStatus",
    "ShortTermLiabilityStatus",
    "BudgetProgressStatus",
    "FlowDirection",
    "TaxRelevance",
    "ReminderKind",
]
