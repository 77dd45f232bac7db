"""Tests for the GetNetWorthSeriesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from networth_dashboard.application.use_cases.get_net_worth_series import (
    GetNetWorthSeriesUseCase,
)
from networth_dashboard.domain.models import AnalysisStatus


def _source(table) -> MagicMock:
    source = MagicMock()
    source.description = "test.csv"
    source.read_table.return_value = table
    return source


def test_execute_aggregates_table_by_category() -> None:
    """Use case should parse the table and roll it up per time label."""
    table = [
        ["Account", "2024-01", "2024-02"],
        ["Alice - Savings - Chase - Checking", "1,000", "2,000"],
        ["Bob - Savings - Ally", "500", "500"],
        ["Alice - Mortgage - Bank", "-3,000", "-2,900"],
        ["Net Worth", "-1,500", "-400"],
    ]
    logger = MagicMock()
    use_case = GetNetWorthSeriesUseCase(_source(table), logger=logger)

    result = use_case.execute()

    assert result.status is AnalysisStatus.OK
    assert result.classification.positive == ("Savings",)
    assert result.classification.negative == ("Mortgage",)
    assert [point.roll_up for point in result.points] == [
        Decimal("-1500"),
        Decimal("-400"),
    ]
    assert [
        entry.display_name
        for entry in result.accounts_by_category["Savings"]
    ] == ["Chase - Checking", "Ally"]
    assert logger.info.call_count == 2


def test_execute_returns_empty_aggregate_for_short_tables() -> None:
    """Tables without data rows should not raise."""
    logger = MagicMock()
    use_case = GetNetWorthSeriesUseCase(
        _source([["Account", "2024-01"]]),
        logger=logger,
    )

    result = use_case.execute()

    assert result.status is AnalysisStatus.EMPTY
    assert result.points == []
    assert result.classification.all == ()
    logger.warning.assert_called_once()


def test_execute_reads_the_source_once() -> None:
    """The source is read once per execution and never mutated."""
    table = [
        ["Account", "2024-01"],
        ["Alice - Cash - Wallet", "10"],
    ]
    snapshot = [list(row) for row in table]
    source = _source(table)

    GetNetWorthSeriesUseCase(source, logger=MagicMock()).execute()

    source.read_table.assert_called_once_with()
    assert table == snapshot
