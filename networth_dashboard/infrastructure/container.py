"""Composition root for wiring infrastructure adapters."""

from networth_dashboard.application.ports.table_source import TableSourcePort
from networth_dashboard.application.use_cases.get_cashflow import (
    GetCashflowUseCase,
)
from networth_dashboard.application.use_cases.get_net_worth_series import (
    GetNetWorthSeriesUseCase,
)
from networth_dashboard.application.use_cases.get_runway_scenarios import (
    GetRunwayScenariosUseCase,
)
from networth_dashboard.infrastructure.csv_table_source import (
    CsvFileTableSource,
)
from networth_dashboard.infrastructure.logging.logger import get_app_logger
from networth_dashboard.infrastructure.settings import DashboardSettings


def build_net_worth_source(
    settings: DashboardSettings | None = None,
) -> TableSourcePort:
    """Return the configured net worth table source."""
    resolved = settings or DashboardSettings.from_env()
    if resolved.net_worth_file is None:
        raise RuntimeError(
            "No net worth export configured. Set NET_WORTH_CSV."
        )
    return CsvFileTableSource(resolved.net_worth_file)


def build_cashflow_source(
    settings: DashboardSettings | None = None,
) -> TableSourcePort:
    """Return the configured income/expense table source."""
    resolved = settings or DashboardSettings.from_env()
    if resolved.cashflow_file is None:
        raise RuntimeError(
            "No income/expense export configured. Set CASHFLOW_CSV."
        )
    return CsvFileTableSource(resolved.cashflow_file)


def build_net_worth_use_case(
    table_source: TableSourcePort | None = None,
) -> GetNetWorthSeriesUseCase:
    """Return the net worth series use case."""
    return GetNetWorthSeriesUseCase(
        table_source or build_net_worth_source(),
        logger=get_app_logger(),
    )


def build_cashflow_use_case(
    table_source: TableSourcePort | None = None,
) -> GetCashflowUseCase:
    """Return the cash flow use case."""
    return GetCashflowUseCase(
        table_source or build_cashflow_source(),
        logger=get_app_logger(),
    )


def build_runway_use_case(
    settings: DashboardSettings | None = None,
) -> GetRunwayScenariosUseCase:
    """Return the runway scenarios use case."""
    resolved = settings or DashboardSettings.from_env()
    return GetRunwayScenariosUseCase(
        logger=get_app_logger(),
        max_income_streams=resolved.max_income_streams,
    )


__all__ = [
    "build_net_worth_source",
    "build_cashflow_source",
    "build_net_worth_use_case",
    "build_cashflow_use_case",
    "build_runway_use_case",
]
