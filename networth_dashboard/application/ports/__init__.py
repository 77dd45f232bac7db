"""Application ports package."""

from .table_source import TableSourcePort

__all__ = ["TableSourcePort"]
