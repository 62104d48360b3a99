"""Use case to total tax-relevant income and deductions."""

from collections.abc import Callable
from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import TaxSummary
from finledger.domain.services.tax_year import (
    compute_tax_summary,
    tax_year_label_for,
)
from finledger.infrastructure.logging.logger import get_app_logger


class GetTaxSummaryUseCase:
    """Summarize a tax year from tax-relevant transactions."""

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
        year_label: str | None = None,
        as_of: date | None = None,
    ) -> TaxSummary | None:
        """Return the tax summary of a tax year.

        Args:
            year_label: Tax year such as ``2023/2024``; defaults to the tax
                year containing ``as_of``.
            as_of: Optional day of the computation; defaults to today.

        Returns:
            TaxSummary | None: Totals per category, or None for a malformed
            label.
        """
        label = year_label or tax_year_label_for(as_of or self._clock())
        summary = compute_tax_summary(
            self._repository.fetch_transactions(),
            self._repository.fetch_categories(),
            label,
            logger=self._logger,
        )
        if summary is not None:
            self._logger.info(
                f"Tax year {label}: income {summary.total_income}, "
                f"deductions {summary.total_deductions}"
            )
        return summary


__all__ = ["GetTaxSummaryUseCase"]
