"""Tests for the GetRunwayScenariosUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from networth_dashboard.application.use_cases.get_runway_scenarios import (
    GetRunwayScenariosUseCase,
)
from networth_dashboard.domain.models import (
    AccountEntry,
    AnalysisStatus,
    IncomeStream,
)
from networth_dashboard.domain.services.scenarios import (
    ScenarioLimitExceededError,
)


def _accounts() -> dict[str, list[AccountEntry]]:
    return {
        "Savings": [
            AccountEntry(
                category="Savings",
                display_name="Checking",
                label="Alice - Savings - Checking",
                latest_value=Decimal("10000"),
            ),
            AccountEntry(
                category="Savings",
                display_name="Ally",
                label="Alice - Savings - Ally",
                latest_value=Decimal("2000"),
            ),
        ],
        "Brokerage": [
            AccountEntry(
                category="Brokerage",
                display_name="Index Fund",
                label="Alice - Brokerage - Index Fund",
                latest_value=Decimal("50000"),
            ),
        ],
    }


def _streams() -> list[IncomeStream]:
    return [
        IncomeStream(identifier=1, name="A", amount=Decimal("3000")),
        IncomeStream(identifier=2, name="B", amount=Decimal("1000")),
    ]


def test_execute_projects_selected_accounts() -> None:
    """Only the selected accounts form the emergency fund."""
    logger = MagicMock()
    use_case = GetRunwayScenariosUseCase(logger=logger)

    projection = use_case.execute(
        _accounts(),
        {("Savings", 0), ("Savings", 1)},
        _streams(),
        Decimal("3500"),
    )

    assert projection.status is AnalysisStatus.OK
    assert projection.fund_total == Decimal("12000")
    assert [s.name for s in projection.scenarios] == [
        "Lost: A, B",
        "Lost: A",
        "Lost: B",
        "All Income Active",
    ]
    logger.info.assert_called_once()


def test_execute_is_degenerate_without_expenses() -> None:
    """Zero expenses yield no scenarios."""
    use_case = GetRunwayScenariosUseCase(logger=MagicMock())

    projection = use_case.execute(_accounts(), set(), _streams(), "0")

    assert projection.status is AnalysisStatus.DEGENERATE
    assert projection.scenarios == []
    assert projection.fund_total == Decimal("0")


def test_execute_enforces_the_configured_stream_limit() -> None:
    """Too many streams raise instead of enumerating."""
    use_case = GetRunwayScenariosUseCase(
        logger=MagicMock(),
        max_income_streams=1,
    )

    with pytest.raises(ScenarioLimitExceededError):
        use_case.execute(_accounts(), set(), _streams(), Decimal("100"))
