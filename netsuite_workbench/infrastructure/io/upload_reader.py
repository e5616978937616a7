from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
import pandas as pd

from ...domain.entities.upload import UploadedTable
from ...domain.services.parsing import format_locale_date, format_number
from .exceptions import DataParseError, DataSourceNotFoundError

CSV_SUFFIXES = frozenset({".csv", ".txt"})
EXCEL_SUFFIXES = frozenset({".xlsx", ".xlsm"})

EMPTY_FILE_MESSAGE = "File appears to be empty or has no valid data."
NO_HEADERS_MESSAGE = "Could not detect column headers in the first row."
NO_ROWS_MESSAGE = "Spreadsheet has headers but no data rows."


def cell_to_text(value: Any) -> str:
    """Coerce a spreadsheet cell to the string the workbench operates on."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return format_locale_date(value)
    if isinstance(value, time):
        return value.isoformat()
    if isinstance(value, float):
        return format_number(value)
    return str(value)


@dataclass(slots=True)
class UploadReadOptions:
    encoding: str = "utf-8"
    sheet_name: str | None = None


class UploadReader:
    pass

    def __init__(self, options: UploadReadOptions | None = None) -> None:
        super().__init__()
        self.options = options or UploadReadOptions()

    def read(
        self, path: Path, options: UploadReadOptions | None = None
    ) -> UploadedTable:
        if options is None:
            options = self.options
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        suffix = path.suffix.lower()
        if suffix in CSV_SUFFIXES:
            return self._read_csv(path, options)
        if suffix in EXCEL_SUFFIXES:
            return self._read_excel(path, options)
        raise DataParseError(
            f"Unsupported file type {path.suffix!r}; upload a .csv or .xlsx file"
        )

    def _read_csv(self, path: Path, options: UploadReadOptions) -> UploadedTable:
        try:
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
                skip_blank_lines=True,
                encoding=options.encoding,
            )
        except pd.errors.EmptyDataError as e:
            raise DataParseError(EMPTY_FILE_MESSAGE) from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"CSV parse error: {e}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        headers = [str(col) for col in df.columns]
        if not headers or df.empty:
            raise DataParseError(EMPTY_FILE_MESSAGE)
        rows = [
            {header: cell_to_text(value) for header, value in zip(headers, record)}
            for record in df.itertuples(index=False, name=None)
        ]
        return UploadedTable(file_name=path.name, headers=headers, rows=rows)

    def _read_excel(self, path: Path, options: UploadReadOptions) -> UploadedTable:
        try:
            workbook = load_workbook(path, read_only=True, data_only=True)
        except Exception as e:
            raise DataParseError(f"Failed to open workbook {path}: {e}") from e
        try:
            if options.sheet_name is not None:
                if options.sheet_name not in workbook.sheetnames:
                    raise DataParseError(
                        f"Sheet {options.sheet_name!r} not found in {path.name}"
                    )
                sheet = workbook[options.sheet_name]
            else:
                sheet = workbook.worksheets[0]
            raw = [list(row) for row in sheet.iter_rows(values_only=True)]
        finally:
            workbook.close()

        if not raw:
            raise DataParseError(EMPTY_FILE_MESSAGE)
        columns = [
            (index, cell_to_text(cell).strip())
            for index, cell in enumerate(raw[0])
        ]
        columns = [(index, name) for index, name in columns if name]
        if not columns:
            raise DataParseError(NO_HEADERS_MESSAGE)

        rows: list[dict[str, str]] = []
        for record in raw[1:]:
            if not any(cell is not None and str(cell).strip() for cell in record):
                continue
            rows.append(
                {
                    name: cell_to_text(record[index]) if index < len(record) else ""
                    for index, name in columns
                }
            )
        if not rows:
            raise DataParseError(NO_ROWS_MESSAGE)
        return UploadedTable(
            file_name=path.name, headers=[name for _, name in columns], rows=rows
        )
