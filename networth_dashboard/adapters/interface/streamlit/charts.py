"""Chart data preparation for the Streamlit UI.

This module holds pure transformations from the use case outputs to
Altair-ready records and Plotly figures. Streamlit calls stay in ``app``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Literal

from networth_dashboard.domain.models import (
    AccountEntry,
    CashflowView,
    CategoryAggregate,
    CategoryClassification,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


POSITIVE_COLORS = (
    "#2563eb", "#16a34a", "#ca8a04", "#9333ea", "#06b6d4",
    "#0891b2", "#ea580c", "#4f46e5", "#65a30d", "#e11d48",
    "#0284c7", "#d97706", "#7c3aed", "#059669", "#be123c",
)
NEGATIVE_COLORS = (
    "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#ef4444",
    "#f87171", "#fca5a5",
)
POSITIVE_MONTH_COLOR = "#059669"
NEGATIVE_MONTH_COLOR = "#dc2626"
NET_LINE_COLOR = "#2563eb"

SelectionState = Literal["all", "partial", "none"]


def category_color(
    classification: CategoryClassification,
    category: str,
) -> str:
    """Return a stable color, red shades for negative categories."""
    if classification.is_negative(category):
        index = classification.negative.index(category)
        return NEGATIVE_COLORS[index % len(NEGATIVE_COLORS)]
    if category in classification.positive:
        index = classification.positive.index(category)
        return POSITIVE_COLORS[index % len(POSITIVE_COLORS)]
    return POSITIVE_COLORS[0]


def build_category_records(
    aggregate: CategoryAggregate,
    selected: Iterable[str],
) -> list[dict[str, str | float | int]]:
    """Return long-format records of the selected categories.

    Args:
        aggregate: Net worth aggregate.
        selected: Categories to include.

    Returns:
        Records with date, category, amount, stack group and axis order.
    """
    chosen = set(selected)
    records: list[dict[str, str | float | int]] = []
    for order, point in enumerate(aggregate.points):
        for category in aggregate.classification.all:
            if category not in chosen:
                continue
            group = (
                "negative"
                if aggregate.classification.is_negative(category)
                else "positive"
            )
            records.append(
                {
                    "date": point.time_label,
                    "order": order,
                    "category": category,
                    "amount": float(point.value(category)),
                    "group": group,
                }
            )
    return records


def build_roll_up_records(
    aggregate: CategoryAggregate,
    selected: Iterable[str],
) -> list[dict[str, str | float | int]]:
    """Return the net worth of the selected categories at each time label."""
    selected_set = set(selected)
    chosen = [c for c in aggregate.classification.all if c in selected_set]
    return [
        {
            "date": point.time_label,
            "order": order,
            "net_worth": float(point.roll_up_for(chosen)),
        }
        for order, point in enumerate(aggregate.points)
    ]


def category_selection_state(
    accounts_by_category: Mapping[str, Sequence[AccountEntry]],
    selected: Iterable[tuple[str, int]],
    category: str,
) -> SelectionState:
    """Return whether all, some or none of a category's accounts are selected."""
    accounts = accounts_by_category.get(category, ())
    if not accounts:
        return "none"
    chosen = set(selected)
    count = sum(
        1 for position in range(len(accounts)) if (category, position) in chosen
    )
    if count == len(accounts):
        return "all"
    if count:
        return "partial"
    return "none"


def toggle_category_selection(
    accounts_by_category: Mapping[str, Sequence[AccountEntry]],
    selected: Iterable[tuple[str, int]],
    category: str,
) -> set[tuple[str, int]]:
    """Select every account of a category, or clear them all when selected."""
    chosen = set(selected)
    keys = {
        (category, position)
        for position in range(len(accounts_by_category.get(category, ())))
    }
    state = category_selection_state(accounts_by_category, chosen, category)
    if state == "all":
        return chosen - keys
    return chosen | keys


def build_cashflow_figure(view: CashflowView) -> "go.Figure":
    """Build the monthly net cash flow line with colored month markers.

    Args:
        view: Cash flow view produced by the use case.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    months = [point.month for point in view.points]
    nets = [float(point.net) for point in view.points]
    colors = [
        POSITIVE_MONTH_COLOR if point.net >= 0 else NEGATIVE_MONTH_COLOR
        for point in view.points
    ]
    hover = [
        f"Income: {float(point.income):,.2f}<br>"
        f"Total Expenses: {float(point.total_expenses):,.2f}<br>"
        f"Net: {float(point.net):,.2f}"
        for point in view.points
    ]

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Scatter(
                x=months,
                y=nets,
                mode="lines+markers",
                name="Net (Income - Expenses)",
                line=dict(color=NET_LINE_COLOR, width=2),
                marker=dict(color=colors, size=10),
                hovertext=hover,
                hoverinfo="x+text",
            )
        ]
    )
    fig.add_hline(y=0, line_dash="dash", line_color="#666")
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=500,
        xaxis=dict(tickangle=-45),
        yaxis=dict(tickprefix="$"),
    )
    return fig


__all__ = [
    "category_color",
    "build_category_records",
    "build_roll_up_records",
    "category_selection_state",
    "toggle_category_selection",
    "build_cashflow_figure",
]
