"""Tests for the CSV / Excel upload reader."""

from datetime import date, datetime, time
from pathlib import Path

from openpyxl import Workbook
import pytest

from netsuite_workbench.infrastructure.io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
)
from netsuite_workbench.infrastructure.io.upload_reader import (
    EMPTY_FILE_MESSAGE,
    NO_HEADERS_MESSAGE,
    NO_ROWS_MESSAGE,
    UploadReader,
    UploadReadOptions,
    cell_to_text,
)


def _write_xlsx(path: Path, *rows: list[object], title: str | None = None) -> Path:
    workbook = Workbook()
    sheet = workbook.active
    if title:
        sheet.title = title
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return path


class TestCellToText:
    def test_scalars(self):
        assert cell_to_text(None) == ""
        assert cell_to_text(True) == "true"
        assert cell_to_text(False) == "false"
        assert cell_to_text(3.0) == "3"
        assert cell_to_text(2.5) == "2.5"
        assert cell_to_text(7) == "7"
        assert cell_to_text("text") == "text"

    def test_dates_use_month_day_year(self):
        assert cell_to_text(date(2024, 1, 5)) == "1/5/2024"
        assert cell_to_text(datetime(2023, 12, 31, 8, 30)) == "12/31/2023"
        assert cell_to_text(time(8, 30)) == "08:30:00"


class TestReadCsv:
    def test_reads_headers_and_rows_as_strings(self, customer_csv):
        # Act
        table = UploadReader().read(customer_csv)

        # Assert
        assert table.file_name == "customers.csv"
        assert table.headers == ["Company Name", "E-Mail", "Phone Number", "Notes"]
        assert table.row_count == 3
        assert table.rows[1]["Company Name"] == "Globex, Inc."
        assert table.rows[1]["Notes"] == ""
        assert table.rows[2]["E-Mail"] == ""
        assert table.rows[2]["Notes"] == 'said "call back"'

    def test_does_not_coerce_numbers_or_na(self, tmp_path):
        path = tmp_path / "values.csv"
        path.write_text("Zip,Flag\n02134,NA\n00501,null\n", encoding="utf-8")

        table = UploadReader().read(path)

        assert table.rows == [
            {"Zip": "02134", "Flag": "NA"},
            {"Zip": "00501", "Flag": "null"},
        ]

    def test_skips_blank_lines(self, tmp_path):
        path = tmp_path / "gaps.csv"
        path.write_text("A,B\n1,2\n\n3,4\n", encoding="utf-8")

        table = UploadReader().read(path)

        assert table.row_count == 2

    def test_header_only_file_is_empty(self, tmp_path):
        path = tmp_path / "header.csv"
        path.write_text("A,B\n", encoding="utf-8")

        with pytest.raises(DataParseError, match=EMPTY_FILE_MESSAGE):
            UploadReader().read(path)

    def test_blank_file_is_empty(self, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("", encoding="utf-8")

        with pytest.raises(DataParseError, match=EMPTY_FILE_MESSAGE):
            UploadReader().read(path)

    def test_uses_configured_encoding(self, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes("Name\nCafé\n".encode("latin-1"))

        table = UploadReader(UploadReadOptions(encoding="latin-1")).read(path)

        assert table.rows == [{"Name": "Café"}]


class TestReadExcel:
    def test_reads_first_sheet(self, tmp_path):
        path = _write_xlsx(
            tmp_path / "upload.xlsx",
            [" Name ", None, "Joined", "Active", "Qty"],
            ["Acme", "dropped", datetime(2024, 1, 5), True, 3],
            ["  ", None, None, None, None],
            ["Globex", None, None, False, 2.5],
        )

        table = UploadReader().read(path)

        assert table.headers == ["Name", "Joined", "Active", "Qty"]
        assert table.rows == [
            {"Name": "Acme", "Joined": "1/5/2024", "Active": "true", "Qty": "3"},
            {"Name": "Globex", "Joined": "", "Active": "false", "Qty": "2.5"},
        ]

    def test_named_sheet(self, tmp_path):
        path = tmp_path / "multi.xlsx"
        workbook = Workbook()
        workbook.active.append(["Ignored"])
        workbook.active.append(["x"])
        data = workbook.create_sheet("Data")
        data.append(["Item"])
        data.append(["Widget"])
        workbook.save(path)

        table = UploadReader().read(path, UploadReadOptions(sheet_name="Data"))

        assert table.rows == [{"Item": "Widget"}]

    def test_missing_sheet(self, tmp_path):
        path = _write_xlsx(tmp_path / "one.xlsx", ["A"], ["1"])

        with pytest.raises(DataParseError, match="not found"):
            UploadReader().read(path, UploadReadOptions(sheet_name="Nope"))

    def test_blank_header_row(self, tmp_path):
        path = _write_xlsx(tmp_path / "noheaders.xlsx", ["  ", " "], ["a", "b"])

        with pytest.raises(DataParseError, match=NO_HEADERS_MESSAGE):
            UploadReader().read(path)

    def test_headers_without_rows(self, tmp_path):
        path = _write_xlsx(tmp_path / "headers.xlsx", ["A", "B"])

        with pytest.raises(DataParseError, match=NO_ROWS_MESSAGE):
            UploadReader().read(path)


class TestReadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceNotFoundError):
            UploadReader().read(tmp_path / "missing.csv")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(DataParseError, match="Unsupported file type"):
            UploadReader().read(path)

    def test_corrupt_workbook(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a zip file")

        with pytest.raises(DataParseError, match="Failed to open workbook"):
            UploadReader().read(path)
