"""Tests for the GetCashflowUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from networth_dashboard.application.use_cases.get_cashflow import (
    GetCashflowUseCase,
)
from networth_dashboard.domain.models import AnalysisStatus


def _source(table) -> MagicMock:
    source = MagicMock()
    source.description = "cashflow.csv"
    source.read_table.return_value = table
    return source


def test_execute_computes_net_cash_flow() -> None:
    """Use case should return monthly points and statistics."""
    table = [
        ["Category", "Jan", "Feb", "Average", "Total"],
        ["Total Income", "5,000", "5,000", "5,000", "10,000"],
        ["Total Expenses", "4,000", "6,000", "5,000", "10,000"],
    ]
    logger = MagicMock()

    view = GetCashflowUseCase(_source(table), logger=logger).execute()

    assert view.status is AnalysisStatus.OK
    assert [point.net for point in view.points] == [
        Decimal("1000"),
        Decimal("-1000"),
    ]
    assert view.statistics.total_net == Decimal("0")
    assert view.statistics.positive_months == 1
    assert view.statistics.negative_months == 1
    logger.info.assert_called_once()
    logger.warning.assert_not_called()


def test_execute_warns_when_total_rows_are_missing() -> None:
    """Missing total rows produce an incomplete view and a warning."""
    table = [
        ["Category", "Jan", "Average", "Total"],
        ["Total Income", "5,000", "5,000", "5,000"],
    ]
    logger = MagicMock()

    view = GetCashflowUseCase(_source(table), logger=logger).execute()

    assert view.status is AnalysisStatus.INCOMPLETE
    assert view.points == []
    assert logger.warning.called
