"""Tests for the GetNetWorthSummaryUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finledger.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from finledger.domain.models import (
    BankAccount,
    CreditCard,
    PaymentMethod,
    Transaction,
    TransactionType,
)


def test_execute_returns_summary_totals() -> None:
    """Use case should aggregate assets, liabilities, and net worth."""
    repository = MagicMock()
    repository.fetch_bank_accounts.return_value = [
        BankAccount("b1", "Current", Decimal("1200")),
    ]
    repository.fetch_transactions.return_value = [
        Transaction(
            id="tips",
            date="2024-01-02",
            amount=Decimal("30"),
            type=TransactionType.INCOME,
            payment_method=PaymentMethod.CASH,
        ),
    ]
    repository.fetch_credit_cards.return_value = [
        CreditCard("c1", "Visa", Decimal("1000"), Decimal("750")),
    ]
    for name in (
        "fetch_receivables",
        "fetch_non_current_assets",
        "fetch_payables",
        "fetch_long_term_liabilities",
        "fetch_short_term_liabilities",
    ):
        getattr(repository, name).return_value = []
    logger = MagicMock()

    summary = GetNetWorthSummaryUseCase(
        repository,
        logger=logger,
    ).execute(as_of=date(2024, 1, 1))

    assert summary.asset_total == Decimal("1230")
    assert summary.liability_total == Decimal("250")
    assert summary.net_worth == Decimal("980")
    logger.info.assert_called_once()
