"""Port for reading ledger snapshots."""

from typing import Protocol

from finledger.domain.models import (
    BankAccount,
    Budget,
    Category,
    CreditCard,
    FinancialGoal,
    FinancialProfile,
    LongTermLiability,
    NonCurrentAsset,
    Payable,
    Receivable,
    RecurringTransactionRule,
    ShortTermLiability,
    Transaction,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to the ledger records."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return every recorded transaction."""

    def fetch_budgets(self) -> list[Budget]:
        """Return every monthly budget."""

    def fetch_receivables(self) -> list[Receivable]:
        """Return money owed to the user."""

    def fetch_payables(self) -> list[Payable]:
        """Return money the user owes."""

    def fetch_short_term_liabilities(self) -> list[ShortTermLiability]:
        """Return short-term liabilities."""

    def fetch_long_term_liabilities(self) -> list[LongTermLiability]:
        """Return long-term liabilities."""

    def fetch_recurring_rules(self) -> list[RecurringTransactionRule]:
        """Return recurring transaction rules."""

    def fetch_bank_accounts(self) -> list[BankAccount]:
        """Return bank accounts."""

    def fetch_credit_cards(self) -> list[CreditCard]:
        """Return credit cards."""

    def fetch_goals(self) -> list[FinancialGoal]:
        """Return savings goals."""

    def fetch_non_current_assets(self) -> list[NonCurrentAsset]:
        """Return non-current assets."""

    def fetch_categories(self) -> list[Category]:
        """Return transaction categories."""

    def fetch_profile(self) -> FinancialProfile:
        """Return the user figures behind the health indicators."""


class LedgerWriterPort(Protocol):
    """Port persisting the outcome of recurring processing."""

    def save_recurring_rules(
        self,
        rules: list[RecurringTransactionRule],
    ) -> None:
        """Replace stored recurring rules with the provided ones."""

    def add_transactions(self, transactions: list[Transaction]) -> int:
        """Append transactions and return how many were stored."""


__all__ = ["LedgerRepositoryPort", "LedgerWriterPort"]
