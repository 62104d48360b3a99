"""Application use cases package."""

from .get_budget_statuses import GetBudgetStatusesUseCase
from .get_dashboard import DashboardView, GetDashboardUseCase
from .get_financial_health import (
    FinancialHealthView,
    GetFinancialHealthUseCase,
)
from .get_goal_progress import GetGoalProgressUseCase, GoalEntry
from .get_liability_statuses import (
    GetLiabilityStatusesUseCase,
    LiabilityStatusesView,
    LongTermLiabilityEntry,
    ShortTermLiabilityEntry,
)
from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .get_obligation_statuses import (
    GetObligationStatusesUseCase,
    ObligationStatusesView,
    PayableEntry,
    ReceivableEntry,
)
from .get_reminders import GetRemindersUseCase
from .get_tax_summary import GetTaxSummaryUseCase
from .process_recurring_transactions import (
    ProcessRecurringTransactionsUseCase,
)
from .project_cash_flow import CashFlowProjectionView, ProjectCashFlowUseCase

__all__ = [
    "GetBudgetStatusesUseCase",
    "DashboardView",
    "GetDashboardUseCase",
    "FinancialHealthView",
    "GetFinancialHealthUseCase",
    "GetGoalProgressUseCase",
    "GoalEntry",
    "GetLiabilityStatusesUseCase",
    "LiabilityStatusesView",
    "LongTermLiabilityEntry",
    "ShortTermLiabilityEntry",
    "GetNetWorthSummaryUseCase",
    "GetObligationStatusesUseCase",
    "ObligationStatusesView",
    "PayableEntry",
    "ReceivableEntry",
    "GetRemindersUseCase",
    "GetTaxSummaryUseCase",
    "ProcessRecurringTransactionsUseCase",
    "CashFlowProjectionView",
    "ProjectCashFlowUseCase",
]
