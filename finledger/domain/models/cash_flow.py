"""Domain models for the forward cash flow simulation."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .enums import FlowDirection


@dataclass(frozen=True)
class CashFlowEvent:
    """Known future movement of money.

    Attributes:
        date: Day the movement happens.
        amount: Signed amount, positive for inflows and negative for outflows.
        description: Human readable label.
    """

    date: date
    amount: Decimal
    description: str


@dataclass(frozen=True)
class ProjectionEvent:
    """Event applied to a projected day."""

    description: str
    amount: Decimal
    direction: FlowDirection


@dataclass(frozen=True)
class DailyCashFlowProjection:
    """Balance evolution over one projected day."""

    date: date
    start_of_day_balance: Decimal
    events: tuple[ProjectionEvent, ...]
    end_of_day_balance: Decimal

    @property
    def net_change(self) -> Decimal:
        """Return end of day minus start of day balance."""
        return self.end_of_day_balance - self.start_of_day_balance


__all__ = ["CashFlowEvent", "ProjectionEvent", "DailyCashFlowProjection"]
