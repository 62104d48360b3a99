"""Use case to compute receivable and payable statuses."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import (
    ObligationStats,
    ObligationStatus,
    Payable,
    Receivable,
)
from finledger.domain.services.obligations import (
    compute_payable_stats,
    compute_receivable_stats,
)
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReceivableEntry:
    """Receivable paired with its derived figures."""

    receivable: Receivable
    stats: ObligationStats


@dataclass(frozen=True)
class PayableEntry:
    """Payable paired with its derived figures."""

    payable: Payable
    stats: ObligationStats


@dataclass(frozen=True)
class ObligationStatusesView:
    """Statuses of every receivable and payable for one day."""

    as_of: date
    receivables: list[ReceivableEntry]
    payables: list[PayableEntry]

    @property
    def overdue_count(self) -> int:
        """Return how many obligations are overdue."""
        entries = [item.stats for item in self.receivables] + [
            item.stats for item in self.payables
        ]
        return sum(
            1 for stats in entries if stats.status == ObligationStatus.OVERDUE
        )


class GetObligationStatusesUseCase:
    """Compute receivable and payable statuses against a single day."""

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

    def execute(self, as_of: date | None = None) -> ObligationStatusesView:
        """Return statuses of all obligations.

        Args:
            as_of: Optional day of the computation; defaults to today.

        Returns:
            ObligationStatusesView: Receivable and payable statuses.
        """
        today = as_of or self._clock()
        receivables = [
            ReceivableEntry(
                receivable=receivable,
                stats=compute_receivable_stats(
                    receivable,
                    as_of=today,
                    logger=self._logger,
                ),
            )
            for receivable in self._repository.fetch_receivables()
        ]
        payables = [
            PayableEntry(
                payable=payable,
                stats=compute_payable_stats(
                    payable,
                    as_of=today,
                    logger=self._logger,
                ),
            )
            for payable in self._repository.fetch_payables()
        ]
        view = ObligationStatusesView(
            as_of=today,
            receivables=receivables,
            payables=payables,
        )
        self._logger.info(
            f"Computed {len(receivables)} receivables and {len(payables)} "
            f"payables as of {today.isoformat()} "
            f"({view.overdue_count} overdue)"
        )
        return view


__all__ = [
    "GetObligationStatusesUseCase",
    "ObligationStatusesView",
    "ReceivableEntry",
    "PayableEntry",
]
