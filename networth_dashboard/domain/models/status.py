"""Outcome status shared by the analytics pipelines."""

from enum import Enum


class AnalysisStatus(str, Enum):
    """Status of a pipeline run, reported instead of raising.

    Attributes:
        OK: Computation ran and produced a result.
        EMPTY: The input table had fewer than two rows.
        INCOMPLETE: Required aggregate rows were missing.
        DEGENERATE: Computation ran but the result is trivial.
    """

    OK = "ok"
    EMPTY = "empty"
    INCOMPLETE = "incomplete"
    DEGENERATE = "degenerate"


__all__ = ["AnalysisStatus"]
