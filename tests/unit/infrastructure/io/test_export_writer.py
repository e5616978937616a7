"""Tests for writing export files to disk."""

from openpyxl import load_workbook
import pytest

from netsuite_workbench.domain.entities.mapping import FieldMapping
from netsuite_workbench.domain.entities.record_type import RecordType
from netsuite_workbench.domain.entities.validation import ExportResult
from netsuite_workbench.infrastructure.io.exceptions import ExportWriteError
from netsuite_workbench.infrastructure.io.export_writer import ExportFileWriter


def _result(content: str = "A,B\r\n1,2") -> ExportResult:
    return ExportResult(
        csv_content=content,
        file_name="netsuite-customer-import-1.csv",
        row_count=1,
        column_count=2,
    )


class TestExportFileWriter:
    def test_write_csv_keeps_crlf(self, tmp_path):
        path = ExportFileWriter().write_csv(_result(), tmp_path / "out")

        assert path == tmp_path / "out" / "netsuite-customer-import-1.csv"
        assert path.read_bytes() == b"A,B\r\n1,2"

    def test_write_csv_encoding(self, tmp_path):
        writer = ExportFileWriter(encoding="utf-8-sig")

        path = writer.write_csv(_result("Name\r\nCafé"), tmp_path)

        assert path.read_bytes().startswith(b"\xef\xbb\xbf")

    def test_write_workbook(self, tmp_path):
        rows = [{"Name": "Acme"}]
        mappings = [FieldMapping(source_column="Name", target_field="companyname")]

        path = ExportFileWriter().write_workbook(
            rows, mappings, RecordType.CUSTOMER, [], tmp_path
        )

        assert path.name.startswith("workbench-customer-")
        assert path.suffix == ".xlsx"
        assert load_workbook(path).sheetnames[0] == "Data Profile"

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(ExportWriteError, match="Failed to write CSV export"):
            ExportFileWriter().write_csv(_result(), blocker)
