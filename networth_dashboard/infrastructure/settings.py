"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from networth_dashboard.domain.constants import DEFAULT_MAX_INCOME_STREAMS
from networth_dashboard.infrastructure.logging.logger import get_app_logger
from networth_dashboard.utils.utils import get_project_root

DEFAULT_NET_WORTH_FILE = "sample-data.csv"
DEFAULT_CASHFLOW_FILE = "income-expenses.csv"


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for locating exports and bounding scenario enumeration.

    Attributes:
        net_worth_file: Optional path to the net worth CSV export.
        cashflow_file: Optional path to the income/expense CSV export.
        max_income_streams: Largest income stream count enumerated.
    """

    net_worth_file: Optional[Path] = None
    cashflow_file: Optional[Path] = None
    max_income_streams: int = DEFAULT_MAX_INCOME_STREAMS

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        return cls(
            net_worth_file=cls._resolve_file(
                os.getenv("NET_WORTH_CSV"),
                DEFAULT_NET_WORTH_FILE,
                logger=logger,
            ),
            cashflow_file=cls._resolve_file(
                os.getenv("CASHFLOW_CSV"),
                DEFAULT_CASHFLOW_FILE,
                logger=logger,
            ),
            max_income_streams=cls._parse_max_streams(
                os.getenv("RUNWAY_MAX_INCOME_STREAMS"),
                logger=logger,
            ),
        )

    @staticmethod
    def _resolve_file(
        raw_path: str | None,
        default_name: str,
        logger,
    ) -> Path | None:
        """Resolve an export path, falling back to the data/ directory.

        Args:
            raw_path: Path from the environment, if any.
            default_name: File name looked up under data/ when unset.
            logger: Logger used for warnings.

        Returns:
            Path | None: Resolved path, or None when nothing is configured.
        """
        if raw_path and raw_path.strip():
            path = Path(raw_path.strip()).expanduser().resolve()
            if not path.exists():
                logger.warning(f"CSV export does not exist at {path}")
            return path
        default = get_project_root() / "data" / default_name
        if default.exists():
            return default.resolve()
        return None

    @staticmethod
    def _parse_max_streams(raw_value: str | None, logger) -> int:
        """Parse the income stream limit.

        Args:
            raw_value: Value from the environment, if any.
            logger: Logger used for warnings.

        Returns:
            int: Positive limit, or the default when unset or invalid.
        """
        if not raw_value:
            return DEFAULT_MAX_INCOME_STREAMS
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid RUNWAY_MAX_INCOME_STREAMS '{raw_value}'. "
                f"Using {DEFAULT_MAX_INCOME_STREAMS}."
            )
            return DEFAULT_MAX_INCOME_STREAMS
        if value < 1:
            logger.warning(
                f"RUNWAY_MAX_INCOME_STREAMS must be positive, got {value}. "
                f"Using {DEFAULT_MAX_INCOME_STREAMS}."
            )
            return DEFAULT_MAX_INCOME_STREAMS
        return value


__all__ = ["DashboardSettings"]
