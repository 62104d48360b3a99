"""Use case to compute short-term and long-term liability progress."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import (
    LongTermLiability,
    LongTermLiabilityStats,
    ShortTermLiability,
    ShortTermLiabilityStats,
)
from finledger.domain.services.installments import (
    compute_short_term_liability_stats,
)
from finledger.domain.services.liabilities import (
    compute_long_term_liability_stats,
)
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ShortTermLiabilityEntry:
    """Short-term liability paired with its derived figures."""

    liability: ShortTermLiability
    stats: ShortTermLiabilityStats


@dataclass(frozen=True)
class LongTermLiabilityEntry:
    """Long-term liability paired with its payoff progress."""

    liability: LongTermLiability
    stats: LongTermLiabilityStats


@dataclass(frozen=True)
class LiabilityStatusesView:
    """Liability progress for one day."""

    as_of: date
    short_term: list[ShortTermLiabilityEntry]
    long_term: list[LongTermLiabilityEntry]


class GetLiabilityStatusesUseCase:
    """Compute installment and payoff progress of every liability."""

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

    def execute(self, as_of: date | None = None) -> LiabilityStatusesView:
        """Return progress of all liabilities.

        Args:
            as_of: Optional day of the computation; defaults to today.

        Returns:
            LiabilityStatusesView: Short-term and long-term figures.
        """
        today = as_of or self._clock()
        short_term = [
            ShortTermLiabilityEntry(
                liability=liability,
                stats=compute_short_term_liability_stats(
                    liability,
                    as_of=today,
                    logger=self._logger,
                ),
            )
            for liability in self._repository.fetch_short_term_liabilities()
        ]
        long_term = [
            LongTermLiabilityEntry(
                liability=liability,
                stats=compute_long_term_liability_stats(liability),
            )
            for liability in self._repository.fetch_long_term_liabilities()
        ]
        self._logger.info(
            f"Computed {len(short_term)} short-term and {len(long_term)} "
            f"long-term liabilities as of {today.isoformat()}"
        )
        return LiabilityStatusesView(
            as_of=today,
            short_term=short_term,
            long_term=long_term,
        )


__all__ = [
    "GetLiabilityStatusesUseCase",
    "LiabilityStatusesView",
    "ShortTermLiabilityEntry",
    "LongTermLiabilityEntry",
]
