"""Domain package for ledger models and the derived-state engine."""

from .constants import (
    DEFAULT_PROJECTION_DAYS,
    DEFAULT_REMINDER_DAYS,
    NEARING_LIMIT_THRESHOLD,
)
from .models import (
    Budget,
    BudgetStatus,
    DailyCashFlowProjection,
    InvalidDate,
    LedgerSnapshot,
    ObligationStats,
    ShortTermLiabilityStats,
    Transaction,
)
from .services import (
    compute_budget_status,
    compute_obligation_stats,
    compute_short_term_liability_stats,
    next_occurrence,
    first_occurrence,
    parse_local_date,
    advance_months,
    project_cash_flow,
)

__all__ = [
    "DEFAULT_PROJECTION_DAYS",
    "DEFAULT_REMINDER_DAYS",
    "NEARING_LIMIT_THRESHOLD",
    "Budget",
    "BudgetStatus",
    "DailyCashFlowProjection",
    "InvalidDate",
    "LedgerSnapshot",
    "ObligationStats",
    "ShortTermLiabilityStats",
    "Transaction",
    "compute_budget_status",
    "compute_obligation_stats",
    "compute_short_term_liability_stats",
    "next_occurrence",
    "first_occurrence",
    "parse_local_date",
    "advance_months",
    "project_cash_flow",
]
