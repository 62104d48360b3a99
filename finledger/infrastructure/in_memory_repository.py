"""In-memory ledger repository backed by a snapshot."""

from dataclasses import replace

from finledger.domain.models import (
    BankAccount,
    Budget,
    Category,
    CreditCard,
    FinancialGoal,
    FinancialProfile,
    LedgerSnapshot,
    LongTermLiability,
    NonCurrentAsset,
    Payable,
    Receivable,
    RecurringTransactionRule,
    ShortTermLiability,
    Transaction,
)


class InMemoryLedgerRepository:
    """Serve ledger records from an immutable ``LedgerSnapshot``.

    Writes replace the held snapshot; snapshots previously handed out are
    never mutated.
    """

    def __init__(self, snapshot: LedgerSnapshot | None = None) -> None:
        """Initialize the repository.

        Args:
            snapshot: Records to serve; defaults to an empty ledger.
        """
        self._snapshot = snapshot or LedgerSnapshot()

    @property
    def snapshot(self) -> LedgerSnapshot:
        """Return the current snapshot."""
        return self._snapshot

    def fetch_transactions(self) -> list[Transaction]:
        return list(self._snapshot.transactions)

    def fetch_budgets(self) -> list[Budget]:
        return list(self._snapshot.budgets)

    def fetch_receivables(self) -> list[Receivable]:
        return list(self._snapshot.receivables)

    def fetch_payables(self) -> list[Payable]:
        return list(self._snapshot.payables)

    def fetch_short_term_liabilities(self) -> list[ShortTermLiability]:
        return list(self._snapshot.short_term_liabilities)

    def fetch_long_term_liabilities(self) -> list[LongTermLiability]:
        return list(self._snapshot.long_term_liabilities)

    def fetch_recurring_rules(self) -> list[RecurringTransactionRule]:
        return list(self._snapshot.recurring_rules)

    def fetch_bank_accounts(self) -> list[BankAccount]:
        return list(self._snapshot.bank_accounts)

    def fetch_credit_cards(self) -> list[CreditCard]:
        return list(self._snapshot.credit_cards)

    def fetch_goals(self) -> list[FinancialGoal]:
        return list(self._snapshot.goals)

    def fetch_non_current_assets(self) -> list[NonCurrentAsset]:
        return list(self._snapshot.non_current_assets)

    def fetch_categories(self) -> list[Category]:
        return list(self._snapshot.categories)

    def fetch_profile(self) -> FinancialProfile:
        return self._snapshot.profile

    def save_recurring_rules(
        self,
        rules: list[RecurringTransactionRule],
    ) -> None:
        """Replace the recurring rules of the snapshot."""
        self._snapshot = replace(self._snapshot, recurring_rules=tuple(rules))

    def add_transactions(self, transactions: list[Transaction]) -> int:
        """Append transactions whose id is not already stored."""
        known = {transaction.id for transaction in self._snapshot.transactions}
        new = [item for item in transactions if item.id not in known]
        self._snapshot = replace(
            self._snapshot,
            transactions=self._snapshot.transactions + tuple(new),
        )
        return len(new)


__all__ = ["InMemoryLedgerRepository"]
