"""Domain services package."""

from .budgets import (
    classify_progress,
    compute_budget_chain,
    compute_budget_status,
    compute_spent,
    find_budget_for_month,
)
from .cash_flow import (
    credit_card_due_events,
    installment_events,
    iter_cash_flow,
    obligation_events,
    project_cash_flow,
    recurring_events,
)
from .date_math import (
    add_days,
    advance_months,
    advance_months_anchored,
    compare_dates,
    format_iso_date,
    is_before,
    is_valid_date,
    parse_local_date,
    with_day_clamped,
)
from .goals import compute_goal_progress, project_goal_completion
from .installments import (
    count_paid_installments,
    compute_short_term_liability_stats,
    installment_due_date,
)
from .liabilities import (
    compute_long_term_liability_stats,
    estimate_extra_payment_payoff,
)
from .net_worth import compute_net_worth_summary
from .obligations import (
    compute_obligation_stats,
    compute_payable_stats,
    compute_receivable_stats,
)
from .recurrence import (
    compute_next_due_date,
    first_occurrence,
    next_occurrence,
    process_due_rules,
)
from .reminders import collect_reminders
from .reports import (
    category_name,
    compute_cash_balance,
    compute_expense_breakdown,
    compute_financial_health,
)
from .tax_year import (
    compute_tax_summary,
    tax_year_date_range,
    tax_year_label_for,
)

__all__ = [
    "classify_progress",
    "compute_budget_chain",
    "compute_budget_status",
    "compute_spent",
    "find_budget_for_month",
    "credit_card_due_events",
    "installment_events",
    "iter_cash_flow",
    "obligation_events",
    "project_cash_flow",
    "recurring_events",
    "add_days",
    "advance_months",
    "advance_months_anchored",
    "compare_dates",
    "format_iso_date",
    "is_before",
    "is_valid_date",
    "parse_local_date",
    "with_day_clamped",
    "compute_goal_progress",
    "project_goal_completion",
    "count_paid_installments",
    "compute_short_term_liability_stats",
    "installment_due_date",
    "compute_long_term_liability_stats",
    "estimate_extra_payment_payoff",
    "compute_net_worth_summary",
    "compute_obligation_stats",
    "compute_payable_stats",
    "compute_receivable_stats",
    "compute_next_due_date",
    "first_occurrence",
    "next_occurrence",
    "process_due_rules",
    "collect_reminders",
    "category_name",
    "compute_cash_balance",
    "compute_expense_breakdown",
    "compute_financial_health",
    "compute_tax_summary",
    "tax_year_date_range",
    "tax_year_label_for",
]
