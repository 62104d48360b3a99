"""Use case to materialize due recurring transactions."""

from collections.abc import Callable, Collection
from datetime import date

from finledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    LedgerWriterPort,
)
from finledger.domain.models import RecurringProcessingResult
from finledger.domain.services.recurrence import process_due_rules
from finledger.infrastructure.logging.logger import get_app_logger


class ProcessRecurringTransactionsUseCase:
    """Generate the transactions of every due recurring rule.

    Results are returned to the caller; when a writer is provided the updated
    rules and generated transactions are also handed to it.
    """

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        writer: LedgerWriterPort | None = None,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger records.
            writer: Optional port persisting the outcome.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._repository = repository
        self._writer = writer
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(
        self,
        rule_ids: Collection[str] | None = None,
        as_of: date | None = None,
    ) -> RecurringProcessingResult:
        """Process the due occurrence of each active rule.

        Args:
            rule_ids: Optional subset of rules to process.
            as_of: Optional day of the computation; defaults to today.

        Returns:
            RecurringProcessingResult: Updated rules and new transactions.
        """
        today = as_of or self._clock()
        rules = self._repository.fetch_recurring_rules()
        result = process_due_rules(
            rules,
            as_of=today,
            selected_ids=rule_ids,
            logger=self._logger,
        )
        self._logger.info(
            f"Processed {result.processed_count} of {len(rules)} recurring "
            f"rules as of {today.isoformat()}"
        )
        if self._writer is None:
            return result
        if list(result.rules) != list(rules):
            self._writer.save_recurring_rules(list(result.rules))
        if result.processed_count:
            stored = self._writer.add_transactions(
                list(result.generated_transactions)
            )
            self._logger.info(f"Stored {stored} generated transactions")
        return result


__all__ = ["ProcessRecurringTransactionsUseCase"]
