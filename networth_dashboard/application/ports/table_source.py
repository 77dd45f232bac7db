"""Table source ports for the net worth dashboard.

This module defines the application-layer protocol for reading raw export
tables. Infrastructure implementations provide concrete adapters (CSV files,
uploaded text) that satisfy this port.
"""

from typing import Protocol

from networth_dashboard.domain.models import RawTable


class TableSourcePort(Protocol):
    """Port exposing a raw export table.

    Use cases depend on this protocol instead of file formats or upload
    mechanics.
    """

    @property
    def description(self) -> str:
        """Short human readable origin of the table, used in logs."""

    def read_table(self) -> RawTable:
        """Read the export as rows of text cells.

        Returns:
            RawTable: Header row followed by data rows.
        """


__all__ = ["TableSourcePort"]
