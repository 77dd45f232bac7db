"""Domain services for monthly income and expense exports."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from networth_dashboard.domain.constants import (
    CASHFLOW_TRAILING_COLUMNS,
    EXPENSES_CATEGORY,
    INCOME_CATEGORY,
    TOTAL_EXPENSES_ROW_LABEL,
    TOTAL_INCOME_ROW_LABEL,
)
from networth_dashboard.domain.models import (
    AnalysisStatus,
    CashflowPoint,
    CashflowStatistics,
    CashflowView,
    ParsedRow,
    RawTable,
)
from networth_dashboard.domain.services.aggregation import aggregate_categories
from networth_dashboard.domain.services.parsing import (
    iter_data_rows,
    read_time_axis,
)


def compute_cashflow_statistics(
    points: Sequence[CashflowPoint],
) -> CashflowStatistics:
    """Summarize monthly cash flow points.

    Args:
        points: Monthly points in chronological order.

    Returns:
        CashflowStatistics: Totals, averages and month distribution.
        Averages are zero when there are no points.
    """
    total_income = sum((p.income for p in points), Decimal("0"))
    total_expenses = sum((p.total_expenses for p in points), Decimal("0"))
    total_net = sum((p.net for p in points), Decimal("0"))
    count = len(points)
    positive_months = sum(1 for p in points if p.net >= 0)

    def _average(total: Decimal) -> Decimal:
        return total / Decimal(count) if count else Decimal("0")

    return CashflowStatistics(
        month_count=count,
        total_income=total_income,
        total_expenses=total_expenses,
        total_net=total_net,
        average_income=_average(total_income),
        average_expenses=_average(total_expenses),
        average_net=_average(total_net),
        positive_months=positive_months,
        negative_months=count - positive_months,
    )


def build_cashflow_view(
    table: RawTable,
    *,
    logger: Logger | None = None,
) -> CashflowView:
    """Compute monthly net cash flow from an income/expense export.

    The header is ``[Label, month1, ..., monthN, average, total]``. The
    ``Total Income`` and ``Total Expenses`` rows are both required.

    Args:
        table: Raw income/expense table.
        logger: Optional logger used for warnings.

    Returns:
        CashflowView: Monthly points and statistics. The status is EMPTY for
        tables with fewer than two rows and INCOMPLETE when a total row is
        missing; both come with no points.
    """
    if len(table) < 2:
        return _empty_view(AnalysisStatus.EMPTY)

    rows_by_label = {}
    for data_row in iter_data_rows(
        table,
        trailing_columns=CASHFLOW_TRAILING_COLUMNS,
    ):
        rows_by_label.setdefault(data_row.label, data_row)

    income_row = rows_by_label.get(TOTAL_INCOME_ROW_LABEL)
    expenses_row = rows_by_label.get(TOTAL_EXPENSES_ROW_LABEL)
    if income_row is None or expenses_row is None:
        if logger is not None:
            logger.warning(
                f"Income/expense export lacks '{TOTAL_INCOME_ROW_LABEL}' or "
                f"'{TOTAL_EXPENSES_ROW_LABEL}' rows"
            )
        return _empty_view(AnalysisStatus.INCOMPLETE)

    months = read_time_axis(table, trailing_columns=CASHFLOW_TRAILING_COLUMNS)
    aggregate = aggregate_categories(
        [
            ParsedRow(
                label=income_row.label,
                category=INCOME_CATEGORY,
                display_name=income_row.label,
                amounts=income_row.amounts,
            ),
            ParsedRow(
                label=expenses_row.label,
                category=EXPENSES_CATEGORY,
                display_name=expenses_row.label,
                amounts=tuple(-amount for amount in expenses_row.amounts),
            ),
        ],
        months,
        logger=logger,
    )
    points = [
        CashflowPoint(
            month=point.time_label,
            income=point.value(INCOME_CATEGORY),
            total_expenses=-point.value(EXPENSES_CATEGORY),
            net=point.roll_up,
        )
        for point in aggregate.points
    ]
    return CashflowView(
        points=points,
        statistics=compute_cashflow_statistics(points),
    )


def _empty_view(status: AnalysisStatus) -> CashflowView:
    return CashflowView(
        points=[],
        statistics=compute_cashflow_statistics([]),
        status=status,
    )


__all__ = ["compute_cashflow_statistics", "build_cashflow_view"]
