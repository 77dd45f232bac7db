"""Tests for display formatting helpers."""

from decimal import Decimal

from networth_dashboard.adapters.formatting import (
    format_currency,
    format_runway,
    format_share,
    runway_severity,
)
from networth_dashboard.domain.models import Runway


def test_format_currency_places_sign_before_symbol() -> None:
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("-700")) == "-$700.00"


def test_format_runway_and_severity() -> None:
    assert format_runway(Runway.unbounded()) == "∞"
    assert format_runway(Runway.finite(Decimal("4.84"))) == "4.8"
    assert runway_severity(Runway.unbounded()) == "infinite"
    assert runway_severity(Runway.finite(Decimal("5.9"))) == "critical"
    assert runway_severity(Runway.finite(Decimal("6"))) == "warning"
    assert runway_severity(Runway.finite(Decimal("12"))) == "good"


def test_format_share_rounds_to_whole_percent() -> None:
    assert format_share(Decimal("2") / Decimal("3")) == "67%"
