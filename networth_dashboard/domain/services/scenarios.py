"""Domain services for emergency fund runway scenarios.

Every subset of income streams is enumerated as a bitmask over the stream
list: bit ``j`` of the scenario index marks stream ``j`` as lost. Index 0
is the baseline where all income is active. The cost is ``O(2^n * n)``, so
the stream count is capped.
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from logging import Logger

from networth_dashboard.domain.constants import (
    BASELINE_SCENARIO_NAME,
    DEFAULT_MAX_INCOME_STREAMS,
    LOST_SCENARIO_PREFIX,
)
from networth_dashboard.domain.models import (
    AccountEntry,
    AnalysisStatus,
    IncomeStream,
    Runway,
    RunwayProjection,
    ScenarioResult,
)
from networth_dashboard.utils.decimal_utils import (
    coerce_decimal,
    finite_or_zero,
    parse_amount,
)


class ScenarioLimitExceededError(ValueError):
    """Raised when too many income streams are configured to enumerate."""

    def __init__(self, stream_count: int, max_streams: int) -> None:
        super().__init__(
            f"Cannot enumerate scenarios for {stream_count} income streams; "
            f"the limit is {max_streams}."
        )
        self.stream_count = stream_count
        self.max_streams = max_streams


def compute_runway(fund_total: Decimal, net_monthly: Decimal) -> Runway:
    """Return how long a fund lasts under a monthly net flow.

    Args:
        fund_total: Emergency fund balance; may be negative.
        net_monthly: Monthly income minus expenses.

    Returns:
        Runway: Unbounded when the flow is non-negative, otherwise the fund
        divided by the monthly shortfall.
    """
    if net_monthly >= 0:
        return Runway.unbounded()
    return Runway.finite(fund_total / abs(net_monthly))


def scenario_name(lost_streams: Sequence[IncomeStream]) -> str:
    """Return the display name for a set of lost streams."""
    if not lost_streams:
        return BASELINE_SCENARIO_NAME
    return LOST_SCENARIO_PREFIX + ", ".join(s.name for s in lost_streams)


def enumerate_scenarios(
    fund_total,
    income_streams: Sequence[IncomeStream],
    monthly_expenses,
    *,
    max_streams: int = DEFAULT_MAX_INCOME_STREAMS,
) -> list[ScenarioResult]:
    """Enumerate every combination of lost income streams.

    Args:
        fund_total: Emergency fund balance; non-finite values count as zero.
        income_streams: Streams in display order.
        monthly_expenses: Recurring monthly expenses.
        max_streams: Largest stream count accepted.

    Returns:
        list[ScenarioResult]: ``2^n`` scenarios sorted by months remaining,
        unbounded runways last and ties in enumeration order. Empty when
        there are no streams or expenses are zero.

    Raises:
        ScenarioLimitExceededError: If more than ``max_streams`` streams are
            given.
    """
    fund = finite_or_zero(coerce_decimal(fund_total))
    expenses = parse_amount(monthly_expenses)
    count = len(income_streams)
    if count == 0 or expenses == 0:
        return []
    if count > max_streams:
        raise ScenarioLimitExceededError(count, max_streams)

    results: list[ScenarioResult] = []
    for mask in range(1 << count):
        lost: list[IncomeStream] = []
        active_income = Decimal("0")
        for index, stream in enumerate(income_streams):
            if mask & (1 << index):
                lost.append(stream)
            else:
                active_income += stream.amount
        net_monthly = active_income - expenses
        results.append(
            ScenarioResult(
                name=scenario_name(lost),
                lost_streams=tuple(lost),
                active_income=active_income,
                monthly_expenses=expenses,
                net_monthly=net_monthly,
                months_remaining=compute_runway(fund, net_monthly),
            )
        )
    results.sort(key=lambda scenario: scenario.months_remaining)
    return results


def build_runway_projection(
    fund_total,
    income_streams: Sequence[IncomeStream],
    monthly_expenses,
    *,
    max_streams: int = DEFAULT_MAX_INCOME_STREAMS,
    logger: Logger | None = None,
) -> RunwayProjection:
    """Return the runway projection for an emergency fund.

    Args:
        fund_total: Emergency fund balance; non-finite values count as zero.
        income_streams: Streams in display order.
        monthly_expenses: Recurring monthly expenses.
        max_streams: Largest stream count accepted.
        logger: Optional logger used for debug output.

    Returns:
        RunwayProjection: Inputs, totals and ordered scenarios. The status is
        DEGENERATE when no scenario applies.
    """
    fund = finite_or_zero(coerce_decimal(fund_total))
    expenses = parse_amount(monthly_expenses)
    scenarios = enumerate_scenarios(
        fund,
        income_streams,
        expenses,
        max_streams=max_streams,
    )
    total_income = sum((s.amount for s in income_streams), Decimal("0"))
    status = AnalysisStatus.OK if scenarios else AnalysisStatus.DEGENERATE
    if logger is not None:
        logger.debug(
            f"Enumerated {len(scenarios)} runway scenarios for "
            f"{len(income_streams)} income streams"
        )
    return RunwayProjection(
        fund_total=fund,
        total_income=total_income,
        monthly_expenses=expenses,
        scenarios=scenarios,
        status=status,
    )


def compute_emergency_fund_total(
    accounts_by_category: Mapping[str, Sequence[AccountEntry]],
    selected: Iterable[tuple[str, int]],
) -> Decimal:
    """Sum the latest values of the selected accounts.

    Args:
        accounts_by_category: Account entries grouped by category.
        selected: ``(category, position)`` pairs; unknown pairs are ignored.

    Returns:
        Decimal: Emergency fund total.
    """
    total = Decimal("0")
    for category, position in set(selected):
        accounts = accounts_by_category.get(category, ())
        if 0 <= position < len(accounts):
            total += accounts[position].latest_value
    return total


def select_categories(
    accounts_by_category: Mapping[str, Sequence[AccountEntry]],
    categories: Iterable[str],
) -> set[tuple[str, int]]:
    """Return selection keys for every account of the given categories."""
    return {
        (category, position)
        for category in categories
        for position in range(len(accounts_by_category.get(category, ())))
    }


__all__ = [
    "ScenarioLimitExceededError",
    "compute_runway",
    "scenario_name",
    "enumerate_scenarios",
    "build_runway_projection",
    "compute_emergency_fund_total",
    "select_categories",
]
