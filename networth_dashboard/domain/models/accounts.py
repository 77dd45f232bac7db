"""Domain models for accounts listed in a net worth export."""

from dataclasses import dataclass
from decimal import Decimal

from networth_dashboard.domain.constants import CLOSED_ACCOUNT_PREFIX


@dataclass(frozen=True)
class AccountEntry:
    """Single account row with its latest-period value.

    Attributes:
        category: Category key the account was grouped under.
        display_name: Human readable account name.
        label: Original label cell of the export row.
        latest_value: Value in the final time column of the row.
    """

    category: str
    display_name: str
    label: str
    latest_value: Decimal

    @property
    def is_debt(self) -> bool:
        """Return True when the account currently holds a negative value."""
        return self.latest_value < 0

    @property
    def is_closed(self) -> bool:
        """Return True when the export flags the account as closed."""
        return self.label.startswith(CLOSED_ACCOUNT_PREFIX)


__all__ = ["AccountEntry"]
