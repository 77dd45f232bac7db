"""Tests for the monthly cash flow service."""

from decimal import Decimal

from networth_dashboard.domain.models import AnalysisStatus
from networth_dashboard.domain.services.cashflow import build_cashflow_view


def _table() -> list[list[str]]:
    return [
        ["Category", "Jan", "Feb", "Mar", "Average", "Total"],
        ["Salary", "3,000", "3,000", "3,000", "3,000", "9,000"],
        ["Total Income", "4,000", "3,500", "3,000", "3,500", "10,500"],
        ["Total Expenses", "3,000", "4,000", "3,000", "3,333", "10,000"],
    ]


def test_build_cashflow_view_computes_monthly_net() -> None:
    """Net cash flow is income minus expenses for each month."""
    view = build_cashflow_view(_table())

    assert view.status is AnalysisStatus.OK
    assert [point.month for point in view.points] == ["Jan", "Feb", "Mar"]
    assert [point.income for point in view.points] == [
        Decimal("4000"),
        Decimal("3500"),
        Decimal("3000"),
    ]
    assert [point.total_expenses for point in view.points] == [
        Decimal("3000"),
        Decimal("4000"),
        Decimal("3000"),
    ]
    assert [point.net for point in view.points] == [
        Decimal("1000"),
        Decimal("-500"),
        Decimal("0"),
    ]


def test_build_cashflow_view_summarizes_months() -> None:
    """Totals, averages and the month distribution are computed."""
    stats = build_cashflow_view(_table()).statistics

    assert stats.month_count == 3
    assert stats.total_income == Decimal("10500")
    assert stats.total_expenses == Decimal("10000")
    assert stats.total_net == Decimal("500")
    assert stats.average_income == Decimal("3500")
    assert stats.average_expenses == Decimal("10000") / Decimal("3")
    assert stats.average_net == Decimal("500") / Decimal("3")
    assert stats.positive_months == 2
    assert stats.negative_months == 1
    assert stats.positive_share == Decimal("2") / Decimal("3")


def test_build_cashflow_view_requires_both_total_rows() -> None:
    """A missing total row yields an incomplete, empty view."""
    table = [row for row in _table() if row[0] != "Total Expenses"]

    view = build_cashflow_view(table)

    assert view.status is AnalysisStatus.INCOMPLETE
    assert view.points == []
    assert view.statistics.month_count == 0
    assert view.statistics.average_net == Decimal("0")
    assert view.statistics.positive_share == Decimal("0")


def test_build_cashflow_view_ignores_short_tables() -> None:
    """Header-only tables are reported as empty."""
    view = build_cashflow_view([_table()[0]])

    assert view.status is AnalysisStatus.EMPTY
    assert view.points == []
