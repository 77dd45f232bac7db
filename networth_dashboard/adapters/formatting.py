"""Display formatting shared by the CLI and Streamlit adapters."""

from decimal import Decimal

from networth_dashboard.domain.models import Runway

UNBOUNDED_SYMBOL = "∞"


def format_currency(value: Decimal) -> str:
    """Format an amount as dollars with two decimals."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_runway(runway: Runway) -> str:
    """Format months remaining with one decimal, or the infinity symbol."""
    if runway.is_unbounded:
        return UNBOUNDED_SYMBOL
    return f"{runway.months:.1f}"


def format_share(share: Decimal) -> str:
    """Format a fraction as a whole percentage."""
    return f"{share * 100:.0f}%"


def runway_severity(runway: Runway) -> str:
    """Classify a runway for display: infinite, critical, warning or good."""
    if runway.is_unbounded:
        return "infinite"
    if runway.months < 6:
        return "critical"
    if runway.months < 12:
        return "warning"
    return "good"


__all__ = [
    "UNBOUNDED_SYMBOL",
    "format_currency",
    "format_runway",
    "format_share",
    "runway_severity",
]
