"""Date value types shared by the calculation engine."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class InvalidDate:
    """Marker returned when a date value cannot be parsed.

    Attributes:
        raw: The original value that failed to parse.
    """

    raw: object

    def __str__(self) -> str:
        return f"InvalidDate({self.raw!r})"


DateLike = date | str
MaybeDate = date | InvalidDate


__all__ = ["InvalidDate", "DateLike", "MaybeDate"]
