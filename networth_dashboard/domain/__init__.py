"""Domain package for business rules and core models."""

from .models import (
    AccountEntry,
    AggregatePoint,
    AnalysisStatus,
    CashflowView,
    CategoryAggregate,
    IncomeStream,
    Runway,
    RunwayProjection,
    ScenarioResult,
)
from .services import (
    ScenarioLimitExceededError,
    aggregate_categories,
    build_cashflow_view,
    build_runway_projection,
    compute_emergency_fund_total,
    parse_account_rows,
)

__all__ = [
    "AccountEntry",
    "AggregatePoint",
    "AnalysisStatus",
    "CashflowView",
    "CategoryAggregate",
    "IncomeStream",
    "Runway",
    "RunwayProjection",
    "ScenarioResult",
    "ScenarioLimitExceededError",
    "aggregate_categories",
    "build_cashflow_view",
    "build_runway_projection",
    "compute_emergency_fund_total",
    "parse_account_rows",
]
