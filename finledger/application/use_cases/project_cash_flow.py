"""Use case to project cash balances over the coming days."""

from collections.abc import Callable, Collection
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.constants import CASH_ACCOUNT_ID
from finledger.domain.models import CashFlowEvent, DailyCashFlowProjection
from finledger.domain.services.cash_flow import (
    credit_card_due_events,
    installment_events,
    obligation_events,
    project_cash_flow,
    recurring_events,
)
from finledger.domain.services.reports import compute_cash_balance
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.settings import LedgerSettings
from finledger.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class CashFlowProjectionView:
    """Projection result with the inputs it was computed from."""

    as_of: date
    account_ids: tuple[str, ...]
    starting_balance: Decimal
    days: list[DailyCashFlowProjection]

    @property
    def lowest_balance(self) -> Decimal | None:
        """Return the lowest end-of-day balance of the horizon."""
        if not self.days:
            return None
        return min(day.end_of_day_balance for day in self.days)


class ProjectCashFlowUseCase:
    """Simulate daily balances of the selected accounts."""

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
            settings: Optional settings holding the default horizon.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today
        self._settings = settings or LedgerSettings()

    def execute(
        self,
        account_ids: Collection[str] | None = None,
        horizon_days: int | None = None,
        as_of: date | None = None,
        include_liabilities: bool = True,
    ) -> CashFlowProjectionView:
        """Return the day-by-day projection of the selected accounts.

        The starting balance is the sum of the selected bank accounts plus
        cash in hand when the cash pseudo-account is selected. Receivables
        and payables are only projected when at least one account is
        selected.

        Args:
            account_ids: Bank account ids and/or ``"cash"``; defaults to every
                bank account plus cash.
            horizon_days: Number of days to project; defaults to settings.
            as_of: Optional first projected day; defaults to today.
            include_liabilities: Also project installments and card dues.

        Returns:
            CashFlowProjectionView: Projected days and starting balance.
        """
        today = as_of or self._clock()
        horizon = (
            self._settings.projection_days
            if horizon_days is None
            else horizon_days
        )
        bank_accounts = self._repository.fetch_bank_accounts()
        if account_ids is None:
            selected = tuple(
                [account.id for account in bank_accounts] + [CASH_ACCOUNT_ID]
            )
        else:
            selected = tuple(account_ids)

        starting_balance = Decimal("0")
        for account in bank_accounts:
            if account.id in selected:
                starting_balance += coerce_decimal(account.current_balance)
        if CASH_ACCOUNT_ID in selected:
            starting_balance += compute_cash_balance(
                self._repository.fetch_transactions()
            )

        events: list[CashFlowEvent] = recurring_events(
            self._repository.fetch_recurring_rules(),
            as_of=today,
            horizon_days=horizon,
            account_ids=selected,
            logger=self._logger,
        )
        if selected:
            events.extend(
                obligation_events(
                    self._repository.fetch_receivables(),
                    self._repository.fetch_payables(),
                    as_of=today,
                    logger=self._logger,
                )
            )
        if include_liabilities:
            events.extend(
                installment_events(
                    self._repository.fetch_short_term_liabilities(),
                    as_of=today,
                    logger=self._logger,
                )
            )
            events.extend(
                credit_card_due_events(
                    self._repository.fetch_credit_cards(),
                    as_of=today,
                    horizon_days=horizon,
                )
            )

        days = project_cash_flow(
            starting_balance,
            events,
            as_of=today,
            horizon_days=horizon,
        )
        self._logger.info(
            f"Projected {len(days)} days from {today.isoformat()} for "
            f"{len(selected)} accounts starting at {starting_balance}"
        )
        return CashFlowProjectionView(
            as_of=today,
            account_ids=selected,
            starting_balance=starting_balance,
            days=days,
        )


__all__ = ["ProjectCashFlowUseCase", "CashFlowProjectionView"]
