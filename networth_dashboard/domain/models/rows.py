"""Domain models for parsed export rows."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from networth_dashboard.domain.models.status import AnalysisStatus

RawTable = Sequence[Sequence[str]]


@dataclass(frozen=True)
class DataRow:
    """Rectangular data row with amounts aligned to the time axis."""

    label: str
    amounts: tuple[Decimal, ...]


@dataclass(frozen=True)
class ParsedRow:
    """Account row split into its category and display name.

    Attributes:
        label: Original label cell of the row.
        category: Second dash-delimited segment of the label.
        display_name: Remaining segments, or the full label when empty.
        amounts: One amount per time label, in header order.
    """

    label: str
    category: str
    display_name: str
    amounts: tuple[Decimal, ...]

    @property
    def latest_amount(self) -> Decimal:
        """Return the amount of the final time column."""
        if not self.amounts:
            return Decimal("0")
        return self.amounts[-1]


@dataclass(frozen=True)
class ParsedTable:
    """Time axis and account rows extracted from a raw table."""

    time_labels: tuple[str, ...]
    rows: list[ParsedRow] = field(default_factory=list)
    skipped_count: int = 0
    status: AnalysisStatus = AnalysisStatus.OK


__all__ = ["RawTable", "DataRow", "ParsedRow", "ParsedTable"]
