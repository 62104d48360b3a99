"""Domain models package."""

from .cash_flow import CashFlowEvent, DailyCashFlowProjection, ProjectionEvent
from .dates import DateLike, InvalidDate, MaybeDate
from .enums import (
    BudgetProgressStatus,
    FlowDirection,
    ObligationStatus,
    PaymentMethod,
    PaymentStructure,
    RecurringFrequency,
    ReminderKind,
    ShortTermLiabilityStatus,
    TaxRelevance,
    TransactionType,
)
from .ledger import (
    BankAccount,
    Budget,
    Category,
    CreditCard,
    FinancialGoal,
    FinancialProfile,
    LedgerSnapshot,
    LongTermLiability,
    NonCurrentAsset,
    Payable,
    Payment,
    Receivable,
    RecurringTransactionRule,
    ShortTermLiability,
    Transaction,
    TransactionSplit,
)
from .reports import (
    CategoryTotal,
    EmergencyFundProgress,
    FinancialHealth,
    TaxSummary,
)
from .stats import (
    BudgetStatus,
    GoalProgress,
    GoalProjection,
    InstallmentTally,
    LongTermLiabilityStats,
    NetWorthSummary,
    ObligationStats,
    Occurrence,
    PayoffEstimate,
    RecurringProcessingResult,
    Reminder,
    ShortTermLiabilityStats,
)

__all__ = [
    "CashFlowEvent",
    "DailyCashFlowProjection",
    "ProjectionEvent",
    "DateLike",
    "InvalidDate",
    "MaybeDate",
    "BudgetProgressStatus",
    "FlowDirection",
    "ObligationStatus",
    "PaymentMethod",
    "PaymentStructure",
    "RecurringFrequency",
    "ReminderKind",
    "ShortTermLiabilityStatus",
    "TaxRelevance",
    "TransactionType",
    "BankAccount",
    "Budget",
    "Category",
    "CreditCard",
    "FinancialGoal",
    "FinancialProfile",
    "LedgerSnapshot",
    "LongTermLiability",
    "NonCurrentAsset",
    "Payable",
    "Payment",
    "Receivable",
    "RecurringTransactionRule",
    "ShortTermLiability",
    "Transaction",
    "TransactionSplit",
    "CategoryTotal",
    "EmergencyFundProgress",
    "FinancialHealth",
    "TaxSummary",
    "BudgetStatus",
    "GoalProgress",
    "GoalProjection",
    "InstallmentTally",
    "LongTermLiabilityStats",
    "NetWorthSummary",
    "ObligationStats",
    "Occurrence",
    "PayoffEstimate",
    "RecurringProcessingResult",
    "Reminder",
    "ShortTermLiabilityStats",
]
