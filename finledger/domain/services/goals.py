"""Domain services for savings goals."""

import math
from datetime import date
from decimal import Decimal

from finledger.domain.constants import FULL_PROGRESS
from finledger.domain.models import (
    FinancialGoal,
    GoalProgress,
    GoalProjection,
    InvalidDate,
)
from finledger.domain.services.date_math import advance_months, parse_local_date
from finledger.utils.decimal_utils import coerce_decimal


def compute_goal_progress(goal: FinancialGoal) -> GoalProgress:
    """Return how far a goal is from its target."""
    target = coerce_decimal(goal.target_amount)
    current = coerce_decimal(goal.current_amount)
    progress = current / target * FULL_PROGRESS if target > 0 else Decimal("0")
    return GoalProgress(
        progress=progress,
        remaining=max(Decimal("0"), target - current),
        is_achieved=current >= target,
    )


def project_goal_completion(
    goal: FinancialGoal,
    monthly_contribution: Decimal,
    *,
    as_of: date,
) -> GoalProjection:
    """Project when a goal completes at a steady monthly contribution.

    Args:
        goal: Goal snapshot.
        monthly_contribution: Planned contribution per month.
        as_of: Current calendar day of the computation.

    Returns:
        GoalProjection: Months needed, projected date and whether the
        deadline is met (None without a usable deadline).

    Raises:
        ValueError: If the contribution is not positive.
    """
    contribution = coerce_decimal(monthly_contribution)
    if contribution <= 0:
        raise ValueError("Monthly contribution must be a positive amount")
    remaining = compute_goal_progress(goal).remaining
    months = math.ceil(remaining / contribution) if remaining > 0 else 0
    projected = advance_months(as_of, months)

    meets_deadline = None
    if goal.deadline is not None:
        deadline = parse_local_date(goal.deadline)
        if not isinstance(deadline, InvalidDate):
            meets_deadline = projected <= deadline
    return GoalProjection(
        months_to_goal=months,
        projected_date=projected,
        meets_deadline=meets_deadline,
    )


__all__ = ["compute_goal_progress", "project_goal_completion"]
