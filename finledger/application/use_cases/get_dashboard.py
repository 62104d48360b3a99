"""Use case assembling every dashboard figure against a single day."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.application.use_cases.get_budget_statuses import (
    GetBudgetStatusesUseCase,
)
from finledger.application.use_cases.get_financial_health import (
    FinancialHealthView,
    GetFinancialHealthUseCase,
)
from finledger.application.use_cases.get_liability_statuses import (
    GetLiabilityStatusesUseCase,
    LiabilityStatusesView,
)
from finledger.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from finledger.application.use_cases.get_obligation_statuses import (
    GetObligationStatusesUseCase,
    ObligationStatusesView,
)
from finledger.application.use_cases.get_reminders import GetRemindersUseCase
from finledger.application.use_cases.get_tax_summary import (
    GetTaxSummaryUseCase,
)
from finledger.application.use_cases.project_cash_flow import (
    CashFlowProjectionView,
    ProjectCashFlowUseCase,
)
from finledger.domain.models import (
    BudgetStatus,
    NetWorthSummary,
    Reminder,
    TaxSummary,
)
from finledger.domain.services.date_math import month_key
from finledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finledger.infrastructure.settings import LedgerSettings


@dataclass(frozen=True)
class DashboardView:
    """Every derived figure of the dashboard, computed for ``as_of``."""

    as_of: date
    budgets: list[BudgetStatus]
    obligations: ObligationStatusesView
    liabilities: LiabilityStatusesView
    net_worth: NetWorthSummary
    reminders: list[Reminder]
    cash_flow: CashFlowProjectionView
    health: FinancialHealthView
    tax_summary: TaxSummary | None


class GetDashboardUseCase:
    """Compute the dashboard with today read once for all figures."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], date] | None = None,
        settings: LedgerSettings | None = None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
            settings: Optional settings shared by the nested use cases.
            usage_logger: Optional logger recording dashboard requests.
        """
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock or date.today
        settings = settings or LedgerSettings()
        self._budgets = GetBudgetStatusesUseCase(
            repository, logger=self._logger, settings=settings
        )
        self._obligations = GetObligationStatusesUseCase(
            repository, logger=self._logger
        )
        self._liabilities = GetLiabilityStatusesUseCase(
            repository, logger=self._logger
        )
        self._net_worth = GetNetWorthSummaryUseCase(
            repository, logger=self._logger
        )
        self._reminders = GetRemindersUseCase(
            repository, logger=self._logger, settings=settings
        )
        self._cash_flow = ProjectCashFlowUseCase(
            repository, logger=self._logger, settings=settings
        )
        self._health = GetFinancialHealthUseCase(
            repository, logger=self._logger
        )
        self._tax_summary = GetTaxSummaryUseCase(
            repository, logger=self._logger
        )

    def execute(self, as_of: date | None = None) -> DashboardView:
        """Return the dashboard figures.

        Args:
            as_of: Optional day of the computation; defaults to today.

        Returns:
            DashboardView: Figures that all share the same ``as_of``.
        """
        today = as_of or self._clock()
        self._usage_logger.info(f"GetDashboardUseCase as_of={today.isoformat()}")
        self._logger.info(f"Building dashboard as of {today.isoformat()}")
        return DashboardView(
            as_of=today,
            budgets=self._budgets.execute(year_month=month_key(today)),
            obligations=self._obligations.execute(as_of=today),
            liabilities=self._liabilities.execute(as_of=today),
            net_worth=self._net_worth.execute(as_of=today),
            reminders=self._reminders.execute(as_of=today),
            cash_flow=self._cash_flow.execute(as_of=today),
            health=self._health.execute(as_of=today),
            tax_summary=self._tax_summary.execute(as_of=today),
        )


__all__ = ["GetDashboardUseCase", "DashboardView"]
