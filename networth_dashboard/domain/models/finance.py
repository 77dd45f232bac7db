"""Domain models for financial aggregates."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from networth_dashboard.domain.models.accounts import AccountEntry
from networth_dashboard.domain.models.status import AnalysisStatus


@dataclass(frozen=True)
class CategorySeries:
    """Summed amounts per category and time label.

    Every category holds a value for every time label of the export.
    Lookups of unknown categories or labels default to zero.
    """

    time_labels: tuple[str, ...] = ()
    amounts: dict[str, dict[str, Decimal]] = field(default_factory=dict)

    @property
    def categories(self) -> tuple[str, ...]:
        """Return category keys in first-seen order."""
        return tuple(self.amounts)

    def value(self, category: str, time_label: str) -> Decimal:
        """Return the amount of a category at a time label."""
        return self.amounts.get(category, {}).get(time_label, Decimal("0"))

    def values(self, category: str) -> list[Decimal]:
        """Return a category's amounts in time-axis order."""
        return [self.value(category, label) for label in self.time_labels]


@dataclass(frozen=True)
class CategoryClassification:
    """Partition of category keys by the sign of their mean value.

    Attributes:
        positive: Categories whose mean is zero or above, sorted.
        negative: Categories whose mean is below zero, sorted.
    """

    positive: tuple[str, ...] = ()
    negative: tuple[str, ...] = ()

    @property
    def all(self) -> tuple[str, ...]:
        """Return every category key, sorted."""
        return tuple(sorted(self.positive + self.negative))

    def is_negative(self, category: str) -> bool:
        """Return True when the category belongs to the negative partition."""
        return category in self.negative


@dataclass(frozen=True)
class AggregatePoint:
    """Category values and their roll-up at a single time label."""

    time_label: str
    values: dict[str, Decimal]
    roll_up: Decimal

    def value(self, category: str) -> Decimal:
        """Return the category value at this point, zero when absent."""
        return self.values.get(category, Decimal("0"))

    def roll_up_for(self, categories: Iterable[str]) -> Decimal:
        """Return the roll-up restricted to the given categories."""
        return sum(
            (self.value(category) for category in categories),
            Decimal("0"),
        )


@dataclass(frozen=True)
class CategoryAggregate:
    """Output of the category aggregation over parsed rows."""

    series: CategorySeries
    classification: CategoryClassification
    accounts_by_category: dict[str, list[AccountEntry]]
    points: list[AggregatePoint]
    status: AnalysisStatus = AnalysisStatus.OK

    @property
    def latest_point(self) -> AggregatePoint | None:
        """Return the point of the final time label, if any."""
        if not self.points:
            return None
        return self.points[-1]

    def latest_value(self, category: str) -> Decimal:
        """Return a category's value at the final time label."""
        point = self.latest_point
        if point is None:
            return Decimal("0")
        return point.value(category)


@dataclass(frozen=True)
class CashflowPoint:
    """Income, expenses and net cash flow for one month."""

    month: str
    income: Decimal
    total_expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class CashflowStatistics:
    """Summary statistics over monthly cash flow points."""

    month_count: int
    total_income: Decimal
    total_expenses: Decimal
    total_net: Decimal
    average_income: Decimal
    average_expenses: Decimal
    average_net: Decimal
    positive_months: int
    negative_months: int

    @property
    def positive_share(self) -> Decimal:
        """Return the fraction of months with a non-negative net."""
        if not self.month_count:
            return Decimal("0")
        return Decimal(self.positive_months) / Decimal(self.month_count)

    @property
    def negative_share(self) -> Decimal:
        """Return the fraction of months with a negative net."""
        if not self.month_count:
            return Decimal("0")
        return Decimal(self.negative_months) / Decimal(self.month_count)


@dataclass(frozen=True)
class CashflowView:
    """Monthly cash flow points and statistics for UI rendering."""

    points: list[CashflowPoint]
    statistics: CashflowStatistics
    status: AnalysisStatus = AnalysisStatus.OK


__all__ = [
    "CategorySeries",
    "CategoryClassification",
    "AggregatePoint",
    "CategoryAggregate",
    "CashflowPoint",
    "CashflowStatistics",
    "CashflowView",
]
