"""Domain services aggregating parsed rows by category."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from decimal import Decimal
from logging import Logger

from networth_dashboard.domain.models import (
    AccountEntry,
    AggregatePoint,
    AnalysisStatus,
    CategoryAggregate,
    CategoryClassification,
    CategorySeries,
    ParsedRow,
)


def build_category_series(
    rows: Iterable[ParsedRow],
    time_labels: Sequence[str],
) -> CategorySeries:
    """Sum row amounts per category and time label.

    Args:
        rows: Parsed rows; several rows may share a category.
        time_labels: Time axis of the export, in header order.

    Returns:
        CategorySeries: Amounts for every category at every time label.
    """
    totals: dict[str, defaultdict[str, Decimal]] = {}
    for row in rows:
        per_label = totals.setdefault(row.category, defaultdict(Decimal))
        for time_label, amount in zip(time_labels, row.amounts):
            per_label[time_label] += amount

    amounts = {
        category: {label: per_label[label] for label in time_labels}
        for category, per_label in totals.items()
    }
    return CategorySeries(time_labels=tuple(time_labels), amounts=amounts)


def classify_categories(series: CategorySeries) -> CategoryClassification:
    """Split categories by the sign of their mean across the time axis.

    A mean of exactly zero counts as positive.

    Args:
        series: Category series to classify.

    Returns:
        CategoryClassification: Sorted positive and negative category keys.
    """
    positive: list[str] = []
    negative: list[str] = []
    for category in series.categories:
        if _mean(series.values(category)) < 0:
            negative.append(category)
        else:
            positive.append(category)
    return CategoryClassification(
        positive=tuple(sorted(positive)),
        negative=tuple(sorted(negative)),
    )


def build_aggregate_points(series: CategorySeries) -> list[AggregatePoint]:
    """Build one point per time label with its roll-up.

    Args:
        series: Category series to roll up.

    Returns:
        list[AggregatePoint]: Points in header order.
    """
    categories = sorted(series.categories)
    points: list[AggregatePoint] = []
    for time_label in series.time_labels:
        values = {
            category: series.value(category, time_label)
            for category in categories
        }
        roll_up = sum(values.values(), Decimal("0"))
        points.append(
            AggregatePoint(
                time_label=time_label,
                values=values,
                roll_up=roll_up,
            )
        )
    return points


def group_accounts(rows: Iterable[ParsedRow]) -> dict[str, list[AccountEntry]]:
    """Return one account entry per row, grouped by category in row order."""
    accounts: dict[str, list[AccountEntry]] = {}
    for row in rows:
        accounts.setdefault(row.category, []).append(
            AccountEntry(
                category=row.category,
                display_name=row.display_name,
                label=row.label,
                latest_value=row.latest_amount,
            )
        )
    return accounts


def aggregate_categories(
    rows: Sequence[ParsedRow],
    time_labels: Sequence[str],
    *,
    logger: Logger | None = None,
) -> CategoryAggregate:
    """Aggregate parsed rows into series, classification and roll-ups.

    Args:
        rows: Parsed account rows.
        time_labels: Time axis of the export, in header order.
        logger: Optional logger used for debug output.

    Returns:
        CategoryAggregate: Series, classification, accounts and points. The
        status is DEGENERATE when no row carried a category.
    """
    series = build_category_series(rows, time_labels)
    classification = classify_categories(series)
    points = build_aggregate_points(series)
    accounts = group_accounts(rows)
    status = AnalysisStatus.OK if series.categories else AnalysisStatus.DEGENERATE
    if logger is not None:
        logger.debug(
            f"Aggregated {len(rows)} rows into {len(series.categories)} "
            f"categories over {len(points)} time labels"
        )
    return CategoryAggregate(
        series=series,
        classification=classification,
        accounts_by_category=accounts,
        points=points,
        status=status,
    )


def _mean(values: Sequence[Decimal]) -> Decimal:
    if not values:
        return Decimal("0")
    return sum(values, Decimal("0")) / Decimal(len(values))


__all__ = [
    "build_category_series",
    "classify_categories",
    "build_aggregate_points",
    "group_accounts",
    "aggregate_categories",
]
