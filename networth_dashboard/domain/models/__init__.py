"""Domain models package."""

from .accounts import AccountEntry
from .finance import (
    AggregatePoint,
    CashflowPoint,
    CashflowStatistics,
    CashflowView,
    CategoryAggregate,
    CategoryClassification,
    CategorySeries,
)
from .rows import DataRow, ParsedRow, ParsedTable, RawTable
from .scenarios import IncomeStream, Runway, RunwayProjection, ScenarioResult
from .status import AnalysisStatus

__all__ = [
    "AccountEntry",
    "AggregatePoint",
    "AnalysisStatus",
    "CashflowPoint",
    "CashflowStatistics",
    "CashflowView",
    "CategoryAggregate",
    "CategoryClassification",
    "CategorySeries",
    "DataRow",
    "IncomeStream",
    "ParsedRow",
    "ParsedTable",
    "RawTable",
    "Runway",
    "RunwayProjection",
    "ScenarioResult",
]
