"""Domain services turning raw export tables into typed rows."""

from collections.abc import Iterable, Iterator, Sequence
from logging import Logger

from networth_dashboard.domain.constants import (
    LABEL_DELIMITER,
    NET_WORTH_ROW_LABEL,
)
from networth_dashboard.domain.models import (
    AnalysisStatus,
    DataRow,
    ParsedRow,
    ParsedTable,
    RawTable,
)
from networth_dashboard.utils.decimal_utils import parse_amount


def split_account_label(label: str) -> tuple[str, str] | None:
    """Split an account label into its category and display name.

    Labels follow ``"Owner - Category - Source - Account"``. The owner
    segment is ignored.

    Args:
        label: Raw label cell.

    Returns:
        tuple[str, str] | None: Category key and display name, or None when
        the label has fewer than two segments.
    """
    parts = label.split(LABEL_DELIMITER)
    if len(parts) < 2:
        return None
    category = parts[1].strip()
    display_name = LABEL_DELIMITER.join(parts[2:]).strip() or label
    return category, display_name


def read_time_axis(
    table: RawTable,
    *,
    trailing_columns: int = 0,
) -> tuple[str, ...]:
    """Return the time-axis labels of a table header.

    Args:
        table: Raw table whose first row is the header.
        trailing_columns: Summary columns at the end of the header that are
            not part of the time axis.

    Returns:
        tuple[str, ...]: Header cells after the label column.
    """
    if not table:
        return ()
    labels = list(table[0][1:])
    if trailing_columns:
        labels = labels[:-trailing_columns]
    return tuple(labels)


def iter_data_rows(
    table: RawTable,
    *,
    trailing_columns: int = 0,
    excluded_labels: Iterable[str] = (),
    on_skip=None,
) -> Iterator[DataRow]:
    """Yield the rectangular, labelled data rows of a table.

    Rows with an empty label, an excluded label, or a cell count different
    from the header's are skipped. Amount cells are parsed leniently.

    Args:
        table: Raw table whose first row is the header.
        trailing_columns: Header columns excluded from the time axis.
        excluded_labels: Labels of precomputed rows to leave out.
        on_skip: Optional callable receiving the label of each skipped row.

    Yields:
        DataRow: Label and one amount per time label.
    """
    if len(table) < 2:
        return
    header_width = len(table[0])
    axis_width = len(read_time_axis(table, trailing_columns=trailing_columns))
    excluded = set(excluded_labels)
    for row in table[1:]:
        label = row[0] if row else ""
        if not label or label in excluded or len(row) != header_width:
            if on_skip is not None:
                on_skip(label)
            continue
        amounts = tuple(parse_amount(cell) for cell in row[1:1 + axis_width])
        yield DataRow(label=label, amounts=amounts)


def parse_account_rows(
    table: RawTable,
    *,
    logger: Logger | None = None,
    excluded_labels: Sequence[str] = (NET_WORTH_ROW_LABEL,),
) -> ParsedTable:
    """Parse a net worth export into category-tagged rows.

    Args:
        table: Raw table with a ``[Label, date1, date2, ...]`` header.
        logger: Optional logger used for debug output on skipped rows.
        excluded_labels: Labels of precomputed total rows to leave out.

    Returns:
        ParsedTable: Time labels, parsed rows, and the number of skipped rows.
        The status is EMPTY when the table has fewer than two rows.
    """
    if len(table) < 2:
        return ParsedTable(time_labels=(), status=AnalysisStatus.EMPTY)

    skipped: list[str] = []
    rows: list[ParsedRow] = []
    for data_row in iter_data_rows(
        table,
        excluded_labels=excluded_labels,
        on_skip=skipped.append,
    ):
        split = split_account_label(data_row.label)
        if split is None:
            skipped.append(data_row.label)
            continue
        category, display_name = split
        rows.append(
            ParsedRow(
                label=data_row.label,
                category=category,
                display_name=display_name,
                amounts=data_row.amounts,
            )
        )

    if logger is not None and skipped:
        logger.debug(f"Skipped {len(skipped)} rows without a category")
    return ParsedTable(
        time_labels=read_time_axis(table),
        rows=rows,
        skipped_count=len(skipped),
    )


__all__ = [
    "split_account_label",
    "read_time_axis",
    "iter_data_rows",
    "parse_account_rows",
]
