"""CSV adapters implementing the table source port."""

import csv
import io
from pathlib import Path

from networth_dashboard.application.ports.table_source import TableSourcePort
from networth_dashboard.domain.models import RawTable


FALLBACK_ENCODING = "latin-1"


def decode_csv_bytes(
    data: bytes,
    encoding: str = "utf-8",
    fallback_encoding: str = FALLBACK_ENCODING,
) -> str:
    """Decode exported bytes, falling back for legacy spreadsheet encodings.

    Args:
        data: Raw file content.
        encoding: Preferred encoding.
        fallback_encoding: Encoding used when ``encoding`` cannot decode the
            content. Latin-1 maps every byte, so the fallback never fails.

    Returns:
        str: Decoded text.
    """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        return data.decode(fallback_encoding)


def parse_csv_text(text: str) -> list[list[str]]:
    """Split CSV text into rows of cells.

    Blank lines are dropped and a leading byte order mark is removed.

    Args:
        text: Raw CSV content.

    Returns:
        list[list[str]]: Rows of text cells.
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    return [row for row in reader if row]


class CsvTextTableSource(TableSourcePort):
    """Table source backed by CSV text already in memory (e.g. an upload)."""

    def __init__(self, text: str, name: str = "uploaded CSV") -> None:
        self._text = text
        self._name = name

    @property
    def description(self) -> str:
        return self._name

    def read_table(self) -> RawTable:
        return parse_csv_text(self._text)


class CsvFileTableSource(TableSourcePort):
    """Table source reading a CSV export from disk."""

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        """Initialize the source.

        Args:
            path: Location of the CSV export.
            encoding: Text encoding of the file.
        """
        self._path = Path(path)
        self._encoding = encoding

    @property
    def description(self) -> str:
        return str(self._path)

    def read_table(self) -> RawTable:
        """Read the CSV file.

        Content that is not valid in the configured encoding is decoded as
        Latin-1.

        Returns:
            RawTable: Rows of text cells.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        text = decode_csv_bytes(self._path.read_bytes(), self._encoding)
        return parse_csv_text(text)


__all__ = [
    "decode_csv_bytes",
    "parse_csv_text",
    "CsvTextTableSource",
    "CsvFileTableSource",
]
