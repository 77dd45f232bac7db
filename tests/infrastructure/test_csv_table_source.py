"""Tests for the CSV table sources."""

from pathlib import Path

import pytest

from networth_dashboard.infrastructure.csv_table_source import (
    CsvFileTableSource,
    CsvTextTableSource,
    decode_csv_bytes,
    parse_csv_text,
)


def test_parse_csv_text_keeps_quoted_separators() -> None:
    """Quoted amounts keep their thousands separators for the parser."""
    text = 'Account,Jan\n"Alice - Savings - Ally","1,250.00"\n'

    assert parse_csv_text(text) == [
        ["Account", "Jan"],
        ["Alice - Savings - Ally", "1,250.00"],
    ]


def test_parse_csv_text_drops_blank_lines_and_bom() -> None:
    """Blank lines and a byte order mark are removed."""
    text = "\ufeffAccount,Jan\n\nNet Worth,10\n\n"

    assert parse_csv_text(text) == [["Account", "Jan"], ["Net Worth", "10"]]


def test_text_source_reads_uploaded_content() -> None:
    """The text source exposes its rows and name."""
    source = CsvTextTableSource("Account,Jan\n", name="upload.csv")

    assert source.description == "upload.csv"
    assert source.read_table() == [["Account", "Jan"]]


def test_file_source_reads_from_disk(tmp_path: Path) -> None:
    """The file source reads the export on each call."""
    path = tmp_path / "export.csv"
    path.write_text("Account,Jan\nAlice - Cash - Wallet,5\n", encoding="utf-8")
    source = CsvFileTableSource(path)

    assert source.description == str(path)
    assert source.read_table()[1] == ["Alice - Cash - Wallet", "5"]


def test_file_source_raises_for_missing_file(tmp_path: Path) -> None:
    """Missing files surface as FileNotFoundError."""
    source = CsvFileTableSource(tmp_path / "missing.csv")

    with pytest.raises(FileNotFoundError):
        source.read_table()


def test_file_source_falls_back_to_latin_1(tmp_path: Path) -> None:
    """Spreadsheet exports saved as Latin-1 are still readable."""
    path = tmp_path / "export.csv"
    path.write_bytes(
        "Account,Jan\nJosé - Savings - Caixa,100\n".encode("latin-1")
    )

    table = CsvFileTableSource(path).read_table()

    assert table[1] == ["José - Savings - Caixa", "100"]


def test_decode_csv_bytes_prefers_the_requested_encoding() -> None:
    """Valid UTF-8 is decoded as such and only invalid bytes fall back."""
    assert decode_csv_bytes("Café".encode("utf-8")) == "Café"
    assert decode_csv_bytes(b"Caf\xe9") == "Café"
