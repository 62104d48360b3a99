"""Use case to compute the dashboard's financial health indicators."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import CategoryTotal, FinancialHealth
from finledger.domain.services.reports import (
    compute_cash_balance,
    compute_expense_breakdown,
    compute_financial_health,
)
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinancialHealthView:
    """Health indicators with cash in hand and the month's spending."""

    as_of: date
    cash_balance: Decimal
    health: FinancialHealth
    expense_breakdown: list[CategoryTotal]


class GetFinancialHealthUseCase:
    """Compute cash, spending breakdown and health indicators."""

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
        as_of: date | None = None,
        breakdown_start: date | None = None,
    ) -> FinancialHealthView:
        """Return the health indicators.

        Args:
            as_of: Optional day of the computation; defaults to today.
            breakdown_start: First day of the expense breakdown; defaults to
                the first day of ``as_of``'s month.

        Returns:
            FinancialHealthView: Cash, indicators and expense breakdown.
        """
        today = as_of or self._clock()
        transactions = self._repository.fetch_transactions()
        cash_balance = compute_cash_balance(transactions)
        health = compute_financial_health(
            transactions,
            as_of=today,
            profile=self._repository.fetch_profile(),
            bank_accounts=self._repository.fetch_bank_accounts(),
            cash_balance=cash_balance,
            long_term_liabilities=(
                self._repository.fetch_long_term_liabilities()
            ),
            short_term_liabilities=(
                self._repository.fetch_short_term_liabilities()
            ),
            logger=self._logger,
        )
        breakdown = compute_expense_breakdown(
            transactions,
            self._repository.fetch_categories(),
            start=breakdown_start or today.replace(day=1),
            end=today,
            logger=self._logger,
        )
        self._logger.info(
            f"Financial health for {today.isoformat()}: savings rate "
            f"{health.savings_rate}, {len(breakdown)} expense categories"
        )
        return FinancialHealthView(
            as_of=today,
            cash_balance=cash_balance,
            health=health,
            expense_breakdown=breakdown,
        )


__all__ = ["GetFinancialHealthUseCase", "FinancialHealthView"]
