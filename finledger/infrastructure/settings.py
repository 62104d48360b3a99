"""Settings helpers for the ledger engine."""

from dataclasses import dataclass
from decimal import Decimal
import os

import dotenv

from finledger.domain.constants import (
    DEFAULT_PROJECTION_DAYS,
    DEFAULT_REMINDER_DAYS,
    NEARING_LIMIT_THRESHOLD,
)
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Tunable defaults of the derived-state computations.

    Attributes:
        projection_days: Default cash flow projection horizon in days.
        reminder_days: Default reminder look-ahead window in days.
        nearing_limit_threshold: Budget progress percentage flagged as
            nearing the limit.
    """

    projection_days: int = DEFAULT_PROJECTION_DAYS
    reminder_days: int = DEFAULT_REMINDER_DAYS
    nearing_limit_threshold: Decimal = NEARING_LIMIT_THRESHOLD

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Values are read after loading a ``.env`` file when present.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            projection_days=cls._read_int(
                "FINLEDGER_PROJECTION_DAYS",
                DEFAULT_PROJECTION_DAYS,
                logger=logger,
            ),
            reminder_days=cls._read_int(
                "FINLEDGER_REMINDER_DAYS",
                DEFAULT_REMINDER_DAYS,
                logger=logger,
            ),
            nearing_limit_threshold=Decimal(
                cls._read_int(
                    "FINLEDGER_NEARING_LIMIT_PCT",
                    int(NEARING_LIMIT_THRESHOLD),
                    logger=logger,
                )
            ),
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read an integer environment variable.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(
                f"Invalid integer {raw!r} for {name}; using default {default}"
            )
            return default


__all__ = ["LedgerSettings"]
