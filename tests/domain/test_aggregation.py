"""Tests for the category aggregation service."""

from decimal import Decimal

from networth_dashboard.domain.models import AnalysisStatus, ParsedRow
from networth_dashboard.domain.services.aggregation import (
    aggregate_categories,
    build_category_series,
)
from networth_dashboard.domain.services.parsing import parse_account_rows

TIME_LABELS = ("2024-01", "2024-02")


def _row(category: str, *amounts: str, name: str = "Account") -> ParsedRow:
    return ParsedRow(
        label=f"Owner - {category} - {name}",
        category=category,
        display_name=name,
        amounts=tuple(Decimal(amount) for amount in amounts),
    )


def _rows() -> list[ParsedRow]:
    return [
        _row("Savings", "100", "200", name="Checking"),
        _row("Savings", "50", "50", name="Ally"),
        _row("Credit", "-300", "100"),
        _row("Zero", "5", "-5"),
    ]


def test_series_sums_rows_sharing_a_category() -> None:
    """Rows of the same category are added per time label."""
    aggregate = aggregate_categories(_rows(), TIME_LABELS)

    assert aggregate.series.value("Savings", "2024-01") == Decimal("150")
    assert aggregate.series.value("Savings", "2024-02") == Decimal("250")
    assert aggregate.series.categories == ("Savings", "Credit", "Zero")


def test_series_defaults_missing_values_to_zero() -> None:
    """Unknown keys and missing cells read as zero."""
    series = build_category_series([_row("Cash", "10")], TIME_LABELS)

    assert series.amounts["Cash"] == {
        "2024-01": Decimal("10"),
        "2024-02": Decimal("0"),
    }
    assert series.value("Unknown", "2024-01") == Decimal("0")
    assert series.value("Cash", "2099-01") == Decimal("0")


def test_classification_uses_mean_over_time() -> None:
    """Categories are split once by their mean; zero counts as positive."""
    aggregate = aggregate_categories(_rows(), TIME_LABELS)

    assert aggregate.classification.positive == ("Savings", "Zero")
    assert aggregate.classification.negative == ("Credit",)
    assert aggregate.classification.all == ("Credit", "Savings", "Zero")


def test_points_roll_up_every_category() -> None:
    """The roll-up equals the sum of category values at each label."""
    aggregate = aggregate_categories(_rows(), TIME_LABELS)

    assert [point.time_label for point in aggregate.points] == list(
        TIME_LABELS
    )
    assert [point.roll_up for point in aggregate.points] == [
        Decimal("-145"),
        Decimal("345"),
    ]
    for point in aggregate.points:
        assert point.roll_up == sum(point.values.values(), Decimal("0"))
    assert aggregate.points[0].roll_up_for(["Savings"]) == Decimal("150")


def test_points_keep_header_order() -> None:
    """Time labels are not re-sorted."""
    labels = ("2024-03", "2024-01")

    aggregate = aggregate_categories([_row("Cash", "1", "2")], labels)

    assert [point.time_label for point in aggregate.points] == list(labels)


def test_accounts_keep_one_entry_per_row_with_latest_value() -> None:
    """Account entries carry the final time column of their own row."""
    aggregate = aggregate_categories(_rows(), TIME_LABELS)

    savings = aggregate.accounts_by_category["Savings"]
    assert [entry.display_name for entry in savings] == ["Checking", "Ally"]
    assert [entry.latest_value for entry in savings] == [
        Decimal("200"),
        Decimal("50"),
    ]
    assert aggregate.accounts_by_category["Credit"][0].is_debt is False
    assert aggregate.latest_value("Credit") == Decimal("100")


def test_aggregation_is_idempotent() -> None:
    """Running the aggregation twice yields equal results."""
    first = aggregate_categories(_rows(), TIME_LABELS)
    second = aggregate_categories(_rows(), TIME_LABELS)

    assert first == second


def test_empty_input_returns_empty_structures() -> None:
    """No rows produce empty outputs flagged as degenerate."""
    aggregate = aggregate_categories([], ())

    assert aggregate.status is AnalysisStatus.DEGENERATE
    assert aggregate.series.categories == ()
    assert aggregate.points == []
    assert aggregate.accounts_by_category == {}
    assert aggregate.latest_point is None
    assert aggregate.latest_value("Savings") == Decimal("0")


def test_oversized_cells_do_not_overflow_the_roll_up() -> None:
    """Cells beyond the supported magnitude count as zero when summed."""
    parsed = parse_account_rows(
        [
            ["Account", "2024-01"],
            ["Owner - Cash - Wallet", "9e999999"],
            ["Owner - Bank - Checking", "9e999999"],
            ["Owner - Bank - Savings", "25"],
        ]
    )

    aggregate = aggregate_categories(parsed.rows, parsed.time_labels)

    assert aggregate.status is AnalysisStatus.OK
    assert aggregate.latest_point.roll_up == Decimal("25")
