"""Use case to compute the per-category net worth series of an export."""

from networth_dashboard.application.ports.table_source import TableSourcePort
from networth_dashboard.domain.models import (
    AnalysisStatus,
    CategoryAggregate,
    CategoryClassification,
    CategorySeries,
)
from networth_dashboard.domain.services.aggregation import aggregate_categories
from networth_dashboard.domain.services.parsing import parse_account_rows
from networth_dashboard.infrastructure.logging.logger import get_app_logger


class GetNetWorthSeriesUseCase:
    """Parse a net worth export and aggregate it by category."""

    def __init__(
        self,
        table_source: TableSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            table_source: Port providing the raw net worth table.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._table_source = table_source
        self._logger = logger or get_app_logger()

    def execute(self) -> CategoryAggregate:
        """Return the category series, classification and roll-ups.

        Returns:
            CategoryAggregate: Aggregated view of the export. Tables with
            fewer than two rows give an empty aggregate with status EMPTY.
        """
        table = self._table_source.read_table()
        parsed = parse_account_rows(table, logger=self._logger)
        if parsed.status is AnalysisStatus.EMPTY:
            self._logger.warning(
                f"Net worth export {self._table_source.description} "
                f"has no data rows"
            )
            return CategoryAggregate(
                series=CategorySeries(),
                classification=CategoryClassification(),
                accounts_by_category={},
                points=[],
                status=AnalysisStatus.EMPTY,
            )

        self._logger.info(
            f"Parsed {len(parsed.rows)} account rows from "
            f"{self._table_source.description} "
            f"({parsed.skipped_count} skipped)"
        )
        aggregate = aggregate_categories(
            parsed.rows,
            parsed.time_labels,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth series computed: "
            f"positive={len(aggregate.classification.positive)}, "
            f"negative={len(aggregate.classification.negative)}, "
            f"points={len(aggregate.points)}"
        )
        return aggregate


__all__ = ["GetNetWorthSeriesUseCase", "CategoryAggregate"]
