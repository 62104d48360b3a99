"""Use case to compute net worth from ledger balances."""

from collections.abc import Callable
from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import NetWorthSummary
from finledger.domain.services.net_worth import compute_net_worth_summary
from finledger.domain.services.reports import compute_cash_balance
from finledger.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth from every asset and liability record."""

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

    def execute(self, as_of: date | None = None) -> NetWorthSummary:
        """Return net worth totals.

        Args:
            as_of: Optional day of the computation; defaults to today.

        Returns:
            NetWorthSummary: Totals for assets, liabilities, and net worth.
        """
        today = as_of or self._clock()
        summary = compute_net_worth_summary(
            bank_accounts=self._repository.fetch_bank_accounts(),
            cash_balance=compute_cash_balance(
                self._repository.fetch_transactions()
            ),
            receivables=self._repository.fetch_receivables(),
            non_current_assets=self._repository.fetch_non_current_assets(),
            payables=self._repository.fetch_payables(),
            credit_cards=self._repository.fetch_credit_cards(),
            long_term_liabilities=(
                self._repository.fetch_long_term_liabilities()
            ),
            short_term_liabilities=(
                self._repository.fetch_short_term_liabilities()
            ),
            as_of=today,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth as of {today.isoformat()}: {summary.net_worth} "
            f"(assets {summary.asset_total}, "
            f"liabilities {summary.liability_total})"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase"]
