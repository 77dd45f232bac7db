"""Use case to compute monthly net cash flow statistics."""

from networth_dashboard.application.ports.table_source import TableSourcePort
from networth_dashboard.domain.models import AnalysisStatus, CashflowView
from networth_dashboard.domain.services.cashflow import build_cashflow_view
from networth_dashboard.infrastructure.logging.logger import get_app_logger


class GetCashflowUseCase:
    """Compute monthly income, expenses and net cash flow from an export."""

    def __init__(
        self,
        table_source: TableSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            table_source: Port providing the raw income/expense table.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._table_source = table_source
        self._logger = logger or get_app_logger()

    def execute(self) -> CashflowView:
        """Return monthly cash flow points and statistics.

        Returns:
            CashflowView: Points and statistics, or an empty view whose
            status tells why nothing was computed.
        """
        table = self._table_source.read_table()
        view = build_cashflow_view(table, logger=self._logger)
        if view.status is not AnalysisStatus.OK:
            self._logger.warning(
                f"Cash flow export {self._table_source.description} "
                f"produced no data (status={view.status.value})"
            )
            return view

        stats = view.statistics
        self._logger.info(
            f"Cash flow computed over {stats.month_count} months: "
            f"income={stats.total_income}, expenses={stats.total_expenses}, "
            f"net={stats.total_net}"
        )
        return view


__all__ = ["GetCashflowUseCase", "CashflowView"]
