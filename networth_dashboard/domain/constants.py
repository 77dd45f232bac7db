"""Domain constants for net worth and runway analytics."""

from decimal import Decimal

LABEL_DELIMITER = " - "

NET_WORTH_ROW_LABEL = "Net Worth"
TOTAL_INCOME_ROW_LABEL = "Total Income"
TOTAL_EXPENSES_ROW_LABEL = "Total Expenses"

# Average and total columns trailing the months in income/expense exports.
CASHFLOW_TRAILING_COLUMNS = 2

INCOME_CATEGORY = "Income"
EXPENSES_CATEGORY = "Expenses"

CLOSED_ACCOUNT_PREFIX = "(Closed"

BASELINE_SCENARIO_NAME = "All Income Active"
LOST_SCENARIO_PREFIX = "Lost: "
DEFAULT_MAX_INCOME_STREAMS = 16

ZERO = Decimal("0")


__all__ = [
    "LABEL_DELIMITER",
    "NET_WORTH_ROW_LABEL",
    "TOTAL_INCOME_ROW_LABEL",
    "TOTAL_EXPENSES_ROW_LABEL",
    "CASHFLOW_TRAILING_COLUMNS",
    "INCOME_CATEGORY",
    "EXPENSES_CATEGORY",
    "CLOSED_ACCOUNT_PREFIX",
    "BASELINE_SCENARIO_NAME",
    "LOST_SCENARIO_PREFIX",
    "DEFAULT_MAX_INCOME_STREAMS",
    "ZERO",
]
