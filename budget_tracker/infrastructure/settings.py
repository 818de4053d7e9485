"""Settings helpers for infrastructure adapters."""

import calendar
import os
from dataclasses import dataclass

import dotenv

from budget_tracker.infrastructure.logging.logger import get_app_logger
from budget_tracker.utils.utils import get_project_root

WEEKDAYS = {
    "monday": calendar.MONDAY,
    "tuesday": calendar.TUESDAY,
    "wednesday": calendar.WEDNESDAY,
    "thursday": calendar.THURSDAY,
    "friday": calendar.FRIDAY,
    "saturday": calendar.SATURDAY,
    "sunday": calendar.SUNDAY,
}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger store and occurrence generation.

    Attributes:
        database_url: SQLAlchemy URL of the ledger database.
        week_start: First weekday, using ``calendar`` numbering.
        horizon_days: Optional occurrence horizon; None means one year.
    """

    database_url: str
    week_start: int = calendar.SUNDAY
    horizon_days: int | None = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        database_url = os.getenv("LEDGER_DB_URL") or cls._default_url()
        week_start = cls._parse_week_start(
            os.getenv("LEDGER_WEEK_START", "sunday"),
            logger=logger,
        )
        horizon_days = cls._parse_horizon(
            os.getenv("LEDGER_HORIZON_DAYS"),
            logger=logger,
        )
        return cls(
            database_url=database_url,
            week_start=week_start,
            horizon_days=horizon_days,
        )

    @staticmethod
    def _default_url() -> str:
        """Return the SQLite URL of the bundled data directory."""
        path = get_project_root() / "data" / "ledger.db"
        return f"sqlite:///{path}"

    @staticmethod
    def _parse_week_start(raw_value: str, logger) -> int:
        """Map a weekday name to its ``calendar`` number.

        Args:
            raw_value: Weekday name, case-insensitive.
            logger: Logger used for warnings.

        Returns:
            int: Weekday number; Sunday when the name is unknown.
        """
        key = raw_value.strip().lower()
        if key not in WEEKDAYS:
            logger.warning(
                f"Unknown LEDGER_WEEK_START '{raw_value}', using sunday"
            )
            return calendar.SUNDAY
        return WEEKDAYS[key]

    @staticmethod
    def _parse_horizon(raw_value: str | None, logger) -> int | None:
        """Parse the optional horizon length in days.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int | None: Positive number of days, or None for one year.
        """
        if not raw_value:
            return None
        try:
            days = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_HORIZON_DAYS '{raw_value}', using one year"
            )
            return None
        if days <= 0:
            logger.warning(
                f"LEDGER_HORIZON_DAYS must be positive, got {days}"
            )
            return None
        return days


__all__ = ["LedgerSettings", "WEEKDAYS"]
