"""Use case to compute budget consumption with rollover."""

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import BudgetProgressStatus, BudgetStatus
from finledger.domain.services.budgets import compute_budget_chain
from finledger.domain.services.date_math import (
    is_valid_date,
    month_key,
    parse_local_date,
)
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.settings import LedgerSettings


class GetBudgetStatusesUseCase:
    """Compute the spending status of every budget."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        settings: LedgerSettings | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            settings: Optional settings holding the nearing-limit threshold.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._settings = settings or LedgerSettings()

    def execute(
        self,
        year_month: tuple[int, int] | None = None,
        category_id: str | None = None,
    ) -> list[BudgetStatus]:
        """Return budget statuses, newest month first.

        The whole chain is always computed oldest to newest so that every
        rollover sees its predecessor's figures; filters apply afterwards.

        Args:
            year_month: Optional (year, month) restricting the result.
            category_id: Optional category restricting the result.

        Returns:
            list[BudgetStatus]: Statuses of the matching budgets.
        """
        budgets = self._repository.fetch_budgets()
        transactions = self._repository.fetch_transactions()
        self._logger.info(
            f"Computing {len(budgets)} budgets over "
            f"{len(transactions)} transactions"
        )
        statuses = compute_budget_chain(
            budgets,
            transactions,
            nearing_limit_threshold=self._settings.nearing_limit_threshold,
            logger=self._logger,
        )
        if category_id is not None:
            statuses = [
                status
                for status in statuses
                if status.budget.category_id == category_id
            ]
        if year_month is not None:
            statuses = [
                status
                for status in statuses
                if _budget_month(status) == year_month
            ]

        overspent = sum(
            1
            for status in statuses
            if status.status == BudgetProgressStatus.OVERSPENT
        )
        self._logger.info(
            f"Returning {len(statuses)} budget statuses ({overspent} overspent)"
        )
        return statuses


def _budget_month(status: BudgetStatus) -> tuple[int, int] | None:
    start = parse_local_date(status.budget.start_date)
    if not is_valid_date(start):
        return None
    return month_key(start)


__all__ = ["GetBudgetStatusesUseCase"]
