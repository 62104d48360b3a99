"""Use case to list upcoming payments."""

from collections.abc import Callable
from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import Reminder
from finledger.domain.services.reminders import collect_reminders
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.settings import LedgerSettings


class GetRemindersUseCase:
    """Collect recurring, installment and card payments coming due."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], date] | None = None,
        settings: LedgerSettings | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
            settings: Optional settings holding the reminder window.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today
        self._settings = settings or LedgerSettings()

    def execute(
        self,
        window_days: int | None = None,
        as_of: date | None = None,
    ) -> list[Reminder]:
        """Return reminders due within the window.

        Args:
            window_days: Look-ahead in days; defaults to settings.
            as_of: Optional day of the computation; defaults to today.

        Returns:
            list[Reminder]: Reminders sorted by due date.
        """
        today = as_of or self._clock()
        window = (
            self._settings.reminder_days if window_days is None else window_days
        )
        reminders = collect_reminders(
            rules=self._repository.fetch_recurring_rules(),
            short_term_liabilities=(
                self._repository.fetch_short_term_liabilities()
            ),
            credit_cards=self._repository.fetch_credit_cards(),
            as_of=today,
            window_days=window,
            logger=self._logger,
        )
        self._logger.info(
            f"Found {len(reminders)} reminders within {window} days of "
            f"{today.isoformat()}"
        )
        return reminders


__all__ = ["GetRemindersUseCase"]
