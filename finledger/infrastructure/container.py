"""Composition root for wiring infrastructure adapters."""

from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.application.use_cases import (
    GetBudgetStatusesUseCase,
    GetDashboardUseCase,
    GetFinancialHealthUseCase,
    GetRemindersUseCase,
    GetTaxSummaryUseCase,
    ProcessRecurringTransactionsUseCase,
    ProjectCashFlowUseCase,
)
from finledger.domain.models import LedgerSnapshot
from finledger.infrastructure.in_memory_repository import (
    InMemoryLedgerRepository,
)
from finledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finledger.infrastructure.settings import LedgerSettings


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_ledger_repository(
    snapshot: LedgerSnapshot | None = None,
) -> InMemoryLedgerRepository:
    """Return a repository serving the provided snapshot."""
    return InMemoryLedgerRepository(snapshot)


def build_budget_statuses_use_case(
    repository: LedgerRepositoryPort,
) -> GetBudgetStatusesUseCase:
    """Return the budget status use case with environment settings."""
    return GetBudgetStatusesUseCase(
        repository,
        logger=get_app_logger(),
        settings=build_settings(),
    )


def build_cash_flow_use_case(
    repository: LedgerRepositoryPort,
) -> ProjectCashFlowUseCase:
    """Return the cash flow projection use case."""
    return ProjectCashFlowUseCase(
        repository,
        logger=get_app_logger(),
        settings=build_settings(),
    )


def build_reminders_use_case(
    repository: LedgerRepositoryPort,
) -> GetRemindersUseCase:
    """Return the reminders use case."""
    return GetRemindersUseCase(
        repository,
        logger=get_app_logger(),
        settings=build_settings(),
    )


def build_recurring_use_case(
    repository: InMemoryLedgerRepository,
) -> ProcessRecurringTransactionsUseCase:
    """Return the recurring processing use case writing back to the store."""
    return ProcessRecurringTransactionsUseCase(
        repository,
        writer=repository,
        logger=get_app_logger(),
    )


def build_tax_summary_use_case(
    repository: LedgerRepositoryPort,
) -> GetTaxSummaryUseCase:
    """Return the tax summary use case."""
    return GetTaxSummaryUseCase(repository, logger=get_app_logger())


def build_financial_health_use_case(
    repository: LedgerRepositoryPort,
) -> GetFinancialHealthUseCase:
    """Return the financial health use case."""
    return GetFinancialHealthUseCase(repository, logger=get_app_logger())


def build_dashboard_use_case(
    repository: LedgerRepositoryPort,
) -> GetDashboardUseCase:
    """Return the dashboard use case."""
    return GetDashboardUseCase(
        repository,
        logger=get_app_logger(),
        settings=build_settings(),
        usage_logger=get_usage_logger(),
    )


__all__ = [
    "build_settings",
    "build_ledger_repository",
    "build_budget_statuses_use_case",
    "build_cash_flow_use_case",
    "build_reminders_use_case",
    "build_recurring_use_case",
    "build_tax_summary_use_case",
    "build_financial_health_use_case",
    "build_dashboard_use_case",
]
