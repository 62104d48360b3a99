"""Use case to report savings goal progress."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import FinancialGoal, GoalProgress, GoalProjection
from finledger.domain.services.goals import (
    compute_goal_progress,
    project_goal_completion,
)
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class GoalEntry:
    """Goal with its progress and optional completion projection."""

    goal: FinancialGoal
    progress: GoalProgress
    projection: GoalProjection | None = None


class GetGoalProgressUseCase:
    """Compute progress of every savings goal."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(
        self,
        monthly_contributions: dict[str, Decimal] | None = None,
        as_of: date | None = None,
    ) -> list[GoalEntry]:
        """Return progress of each goal.

        Args:
            monthly_contributions: Optional contribution per goal id used to
                project completion; goals without a positive contribution or
                already achieved are not projected.
            as_of: Optional day projections start from; defaults to today.

        Returns:
            list[GoalEntry]: Goals with progress and projection.
        """
        today = as_of or self._clock()
        contributions = monthly_contributions or {}
        entries: list[GoalEntry] = []
        for goal in self._repository.fetch_goals():
            progress = compute_goal_progress(goal)
            contribution = coerce_decimal(contributions.get(goal.id))
            projection = None
            if (
                contribution > 0
                and not progress.is_achieved
            ):
                projection = project_goal_completion(
                    goal,
                    contribution,
                    as_of=today,
                )
            entries.append(
                GoalEntry(goal=goal, progress=progress, projection=projection)
            )
        achieved = sum(1 for entry in entries if entry.progress.is_achieved)
        self._logger.info(
            f"Computed {len(entries)} goals ({achieved} achieved)"
        )
        return entries


__all__ = ["GetGoalProgressUseCase", "GoalEntry"]
