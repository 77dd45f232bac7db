"""Application use cases package."""

from .get_cashflow import GetCashflowUseCase, CashflowView
from .get_net_worth_series import GetNetWorthSeriesUseCase, CategoryAggregate
from .get_runway_scenarios import GetRunwayScenariosUseCase, RunwayProjection

__all__ = [
    "GetCashflowUseCase",
    "CashflowView",
    "GetNetWorthSeriesUseCase",
    "CategoryAggregate",
    "GetRunwayScenariosUseCase",
    "RunwayProjection",
]
