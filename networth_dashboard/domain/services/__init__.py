"""Domain services package."""

from .aggregation import (
    aggregate_categories,
    build_aggregate_points,
    build_category_series,
    classify_categories,
    group_accounts,
)
from .cashflow import build_cashflow_view, compute_cashflow_statistics
from .parsing import (
    iter_data_rows,
    parse_account_rows,
    read_time_axis,
    split_account_label,
)
from .scenarios import (
    ScenarioLimitExceededError,
    build_runway_projection,
    compute_emergency_fund_total,
    compute_runway,
    enumerate_scenarios,
    scenario_name,
    select_categories,
)

__all__ = [
    "aggregate_categories",
    "build_aggregate_points",
    "build_category_series",
    "classify_categories",
    "group_accounts",
    "build_cashflow_view",
    "compute_cashflow_statistics",
    "iter_data_rows",
    "parse_account_rows",
    "read_time_axis",
    "split_account_label",
    "ScenarioLimitExceededError",
    "build_runway_projection",
    "compute_emergency_fund_total",
    "compute_runway",
    "enumerate_scenarios",
    "scenario_name",
    "select_categories",
]
