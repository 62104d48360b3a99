"""Tests for the GetFinancialHealthUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finledger.application.use_cases.get_financial_health import (
    GetFinancialHealthUseCase,
)
from finledger.domain.models import (
    BankAccount,
    Category,
    FinancialProfile,
    LongTermLiability,
    PaymentMethod,
    Transaction,
    TransactionType,
)


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(
            id="salary",
            date="2024-03-01",
            amount=Decimal("2000"),
            type=TransactionType.INCOME,
            payment_method=PaymentMethod.BANK_TRANSFER,
        ),
        Transaction(
            id="market",
            date="2024-03-02",
            amount=Decimal("40"),
            type=TransactionType.EXPENSE,
            category_id="food",
            payment_method=PaymentMethod.CASH,
        ),
        Transaction(
            id="groceries",
            date="2024-03-20",
            amount=Decimal("60"),
            type=TransactionType.EXPENSE,
            category_id="food",
            payment_method=PaymentMethod.CREDIT_CARD,
        ),
        Transaction(
            id="atm",
            date="2024-02-27",
            amount=Decimal("200"),
            type=TransactionType.INCOME,
            payment_method=PaymentMethod.CASH,
        ),
    ]
    repository.fetch_categories.return_value = [Category("food", "Food")]
    repository.fetch_profile.return_value = FinancialProfile(
        gross_monthly_income=Decimal("2000"),
        emergency_fund_account_ids=("cash",),
    )
    repository.fetch_bank_accounts.return_value = [
        BankAccount("b1", "Current", Decimal("800")),
    ]
    repository.fetch_long_term_liabilities.return_value = [
        LongTermLiability("ltl-1", "Car", Decimal("6000"), Decimal("400")),
    ]
    repository.fetch_short_term_liabilities.return_value = []
    return repository


def test_execute_combines_cash_health_and_breakdown() -> None:
    """Cash in hand feeds the fund; the breakdown covers the month so far."""
    logger = MagicMock()

    view = GetFinancialHealthUseCase(
        _repository(),
        logger=logger,
        clock=lambda: date(2024, 3, 10),
    ).execute()

    assert view.as_of == date(2024, 3, 10)
    assert view.cash_balance == Decimal("160")
    assert view.health.emergency_fund.current == Decimal("160")
    assert view.health.debt_to_income_ratio == Decimal("20")
    assert [
        (item.category_name, item.total_amount)
        for item in view.expense_breakdown
    ] == [("Food", Decimal("40"))]
    logger.info.assert_called_once()


def test_execute_with_custom_breakdown_start() -> None:
    """The breakdown may start before the current month."""
    view = GetFinancialHealthUseCase(
        _repository(),
        logger=MagicMock(),
    ).execute(as_of=date(2024, 3, 31), breakdown_start=date(2024, 2, 1))

    assert view.expense_breakdown[0].total_amount == Decimal("100")
    assert view.health.expenses == Decimal("100")
