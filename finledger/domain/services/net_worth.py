"""Domain services for net worth aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from finledger.domain.models import (
    BankAccount,
    CreditCard,
    LongTermLiability,
    NetWorthSummary,
    NonCurrentAsset,
    Payable,
    Receivable,
    ShortTermLiability,
)
from finledger.domain.services.installments import (
    compute_short_term_liability_stats,
)
from finledger.domain.services.liabilities import (
    compute_long_term_liability_stats,
)
from finledger.domain.services.obligations import (
    compute_payable_stats,
    compute_receivable_stats,
)
from finledger.utils.decimal_utils import coerce_decimal, sum_decimals


def compute_net_worth_summary(
    *,
    bank_accounts: Iterable[BankAccount],
    cash_balance: Decimal,
    receivables: Iterable[Receivable],
    non_current_assets: Iterable[NonCurrentAsset],
    payables: Iterable[Payable],
    credit_cards: Iterable[CreditCard],
    long_term_liabilities: Iterable[LongTermLiability],
    short_term_liabilities: Iterable[ShortTermLiability],
    as_of: date,
    logger: Logger | None = None,
) -> NetWorthSummary:
    """Compute net worth totals from ledger balances.

    Args:
        bank_accounts: Bank accounts with current balances.
        cash_balance: Cash on hand.
        receivables: Receivables, counted at their remaining amount.
        non_current_assets: Assets, at current value or acquisition cost.
        payables: Payables, counted at their remaining amount.
        credit_cards: Cards, counted at their used balance.
        long_term_liabilities: Loans, at their remaining balance.
        short_term_liabilities: Short-term debts, at their remaining amount.
        as_of: Current calendar day of the computation.
        logger: Logger used for warnings.

    Returns:
        NetWorthSummary: Computed asset, liability, and net worth totals.
    """
    asset_total = (
        sum_decimals(account.current_balance for account in bank_accounts)
        + coerce_decimal(cash_balance)
        + sum_decimals(
            compute_receivable_stats(item, as_of=as_of, logger=logger).remaining
            for item in receivables
        )
        + sum_decimals(
            asset.current_value
            if asset.current_value is not None
            else asset.acquisition_cost
            for asset in non_current_assets
        )
    )
    liability_total = (
        sum_decimals(
            compute_payable_stats(item, as_of=as_of, logger=logger).remaining
            for item in payables
        )
        + sum_decimals(
            coerce_decimal(card.credit_limit)
            - coerce_decimal(card.available_balance)
            for card in credit_cards
        )
        + sum_decimals(
            compute_long_term_liability_stats(item).remaining_balance
            for item in long_term_liabilities
        )
        + sum_decimals(
            compute_short_term_liability_stats(
                item,
                as_of=as_of,
                logger=logger,
            ).remaining
            for item in short_term_liabilities
        )
    )
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
    )


__all__ = ["compute_net_worth_summary"]
