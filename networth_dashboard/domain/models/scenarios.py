"""Domain models for emergency fund runway scenarios."""

from dataclasses import dataclass, field
from decimal import Decimal
from functools import total_ordering

from networth_dashboard.domain.models.status import AnalysisStatus
from networth_dashboard.utils.decimal_utils import parse_amount


@dataclass(frozen=True)
class IncomeStream:
    """Recurring monthly income source.

    Attributes:
        identifier: Stable identifier of the stream.
        name: Display name used in scenario names.
        amount: Monthly amount.
    """

    identifier: int
    name: str
    amount: Decimal

    @classmethod
    def from_raw(cls, identifier: int, name: str, amount) -> "IncomeStream":
        """Build a stream from user input, coercing the amount.

        Args:
            identifier: Stable identifier of the stream.
            name: Display name.
            amount: Numeric value or text; non-numeric text becomes zero.

        Returns:
            IncomeStream: Stream with a Decimal amount.
        """
        return cls(identifier=identifier, name=name, amount=parse_amount(amount))


@total_ordering
@dataclass(frozen=True, eq=False)
class Runway:
    """Months an emergency fund lasts, either finite or unbounded.

    Unbounded runways sort after every finite one and compare equal to
    each other.
    """

    months: Decimal | None = None

    @classmethod
    def finite(cls, months: Decimal) -> "Runway":
        """Return a runway lasting the given number of months."""
        return cls(months=months)

    @classmethod
    def unbounded(cls) -> "Runway":
        """Return a runway for a fund that is never depleted."""
        return cls(months=None)

    @property
    def is_unbounded(self) -> bool:
        """Return True when the fund is never depleted."""
        return self.months is None

    def _key(self) -> tuple[int, Decimal]:
        if self.months is None:
            return (1, Decimal("0"))
        return (0, self.months)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Runway):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Runway") -> bool:
        if not isinstance(other, Runway):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of losing a subset of income streams."""

    name: str
    lost_streams: tuple[IncomeStream, ...]
    active_income: Decimal
    monthly_expenses: Decimal
    net_monthly: Decimal
    months_remaining: Runway

    @property
    def is_baseline(self) -> bool:
        """Return True when no income stream is lost."""
        return not self.lost_streams


@dataclass(frozen=True)
class RunwayProjection:
    """Emergency fund inputs and the ordered scenario results."""

    fund_total: Decimal
    total_income: Decimal
    monthly_expenses: Decimal
    scenarios: list[ScenarioResult] = field(default_factory=list)
    status: AnalysisStatus = AnalysisStatus.OK

    @property
    def net_monthly(self) -> Decimal:
        """Return total income minus monthly expenses."""
        return self.total_income - self.monthly_expenses


__all__ = ["IncomeStream", "Runway", "ScenarioResult", "RunwayProjection"]
