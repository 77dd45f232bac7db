"""Use case to project emergency fund runway under income loss."""

from collections.abc import Iterable, Mapping, Sequence

from networth_dashboard.domain.constants import DEFAULT_MAX_INCOME_STREAMS
from networth_dashboard.domain.models import (
    AccountEntry,
    IncomeStream,
    RunwayProjection,
)
from networth_dashboard.domain.services.scenarios import (
    build_runway_projection,
    compute_emergency_fund_total,
)
from networth_dashboard.infrastructure.logging.logger import get_app_logger


class GetRunwayScenariosUseCase:
    """Enumerate runway scenarios for a selection of emergency fund accounts."""

    def __init__(
        self,
        logger=None,
        max_income_streams: int = DEFAULT_MAX_INCOME_STREAMS,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            max_income_streams: Largest stream count enumerated.
        """
        self._logger = logger or get_app_logger()
        self._max_income_streams = max_income_streams

    def execute(
        self,
        accounts_by_category: Mapping[str, Sequence[AccountEntry]],
        selected_accounts: Iterable[tuple[str, int]],
        income_streams: Sequence[IncomeStream],
        monthly_expenses,
    ) -> RunwayProjection:
        """Return the runway projection for the selected accounts.

        Args:
            accounts_by_category: Account entries from the net worth export.
            selected_accounts: ``(category, position)`` pairs counted as
                emergency funds.
            income_streams: Monthly income streams in display order.
            monthly_expenses: Recurring monthly expenses.

        Returns:
            RunwayProjection: Fund total and scenarios sorted by urgency.

        Raises:
            ScenarioLimitExceededError: If more income streams are given than
                the configured limit.
        """
        fund_total = compute_emergency_fund_total(
            accounts_by_category,
            selected_accounts,
        )
        projection = build_runway_projection(
            fund_total,
            income_streams,
            monthly_expenses,
            max_streams=self._max_income_streams,
            logger=self._logger,
        )
        self._logger.info(
            f"Runway projection computed: fund={projection.fund_total}, "
            f"streams={len(income_streams)}, "
            f"scenarios={len(projection.scenarios)}, "
            f"status={projection.status.value}"
        )
        return projection


__all__ = ["GetRunwayScenariosUseCase", "RunwayProjection"]
