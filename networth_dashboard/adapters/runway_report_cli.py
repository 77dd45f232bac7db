"""CLI adapter printing the net worth, cash flow and runway reports.

The net worth and income/expense exports are located through
``NET_WORTH_CSV`` and ``CASHFLOW_CSV``. Runway inputs come from
``RUNWAY_INCOME_STREAMS`` (``"Salary=3000;Side=1000"``),
``RUNWAY_MONTHLY_EXPENSES`` and ``RUNWAY_FUND_CATEGORIES``.
"""

import os

from networth_dashboard.adapters.formatting import (
    format_currency,
    format_runway,
    format_share,
)
from networth_dashboard.domain.models import AnalysisStatus, IncomeStream
from networth_dashboard.domain.services.scenarios import (
    ScenarioLimitExceededError,
    select_categories,
)
from networth_dashboard.infrastructure.container import (
    build_cashflow_source,
    build_cashflow_use_case,
    build_net_worth_source,
    build_net_worth_use_case,
    build_runway_use_case,
)
from networth_dashboard.infrastructure.logging.logger import get_app_logger
from networth_dashboard.infrastructure.settings import DashboardSettings
from networth_dashboard.utils.decimal_utils import parse_amount


def _parse_income_streams(raw: str | None, logger) -> list[IncomeStream]:
    """Parse ``name=amount`` pairs separated by semicolons.

    Args:
        raw: Raw environment value.
        logger: Logger used for warnings.

    Returns:
        list[IncomeStream]: Streams in the given order.
    """
    streams: list[IncomeStream] = []
    if not raw:
        return streams
    for chunk in raw.split(";"):
        entry = chunk.strip()
        if not entry:
            continue
        if "=" not in entry:
            logger.warning(
                f"Ignoring income stream '{entry}'. Expected name=amount."
            )
            continue
        name, amount = entry.split("=", 1)
        streams.append(
            IncomeStream.from_raw(len(streams) + 1, name.strip(), amount)
        )
    return streams


def _parse_categories(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def main() -> None:
    """Print the reports for the configured exports."""
    logger = get_app_logger()
    settings = DashboardSettings.from_env()
    try:
        net_worth_source = build_net_worth_source(settings)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    try:
        aggregate = build_net_worth_use_case(net_worth_source).execute()
    except FileNotFoundError as exc:
        logger.error(f"Cannot read net worth export: {exc}")
        return
    latest = aggregate.latest_point
    if aggregate.status is AnalysisStatus.EMPTY or latest is None:
        print("Net worth export has no data rows.")
        return

    print(f"Net worth at {latest.time_label}: "
          f"{format_currency(latest.roll_up)}")
    for category in aggregate.classification.all:
        print(f"  {category}: "
              f"{format_currency(aggregate.latest_value(category))}")

    average_expenses = None
    if settings.cashflow_file is not None:
        try:
            view = build_cashflow_use_case(
                build_cashflow_source(settings)
            ).execute()
        except FileNotFoundError as exc:
            logger.error(f"Cannot read income/expense export: {exc}")
            view = None
        if view is not None and view.status is AnalysisStatus.OK:
            stats = view.statistics
            average_expenses = stats.average_expenses
            print(f"Cash flow over {stats.month_count} months: "
                  f"average net {format_currency(stats.average_net)}, "
                  f"positive months {stats.positive_months} "
                  f"({format_share(stats.positive_share)}), "
                  f"negative months {stats.negative_months} "
                  f"({format_share(stats.negative_share)})")

    streams = _parse_income_streams(
        os.getenv("RUNWAY_INCOME_STREAMS"),
        logger,
    )
    raw_expenses = os.getenv("RUNWAY_MONTHLY_EXPENSES")
    monthly_expenses = (
        parse_amount(raw_expenses)
        if raw_expenses
        else average_expenses or 0
    )
    categories = (
        _parse_categories(os.getenv("RUNWAY_FUND_CATEGORIES"))
        or list(aggregate.classification.positive)
    )
    selected = select_categories(aggregate.accounts_by_category, categories)
    try:
        projection = build_runway_use_case(settings).execute(
            aggregate.accounts_by_category,
            selected,
            streams,
            monthly_expenses,
        )
    except ScenarioLimitExceededError as exc:
        logger.error(str(exc))
        return

    print(f"Emergency funds: {format_currency(projection.fund_total)} "
          f"from {', '.join(categories) or 'no categories'}")
    if projection.status is AnalysisStatus.DEGENERATE:
        print("Enter income streams and expenses to see scenarios.")
        return
    for scenario in projection.scenarios:
        print(f"  {scenario.name}: net {format_currency(scenario.net_monthly)}"
              f", months {format_runway(scenario.months_remaining)}")


if __name__ == "__main__":  # pragma: no cover
    main()
