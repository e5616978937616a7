from collections.abc import Mapping, Sequence
from pathlib import Path

from ...domain.entities.column_profile import ColumnProfile
from ...domain.entities.mapping import FieldMapping
from ...domain.entities.record_type import RecordType
from ...domain.entities.validation import ExportResult
from .exceptions import ExportWriteError
from .workbook_writer import workbook_file_name, write_workbench_xlsx


class ExportFileWriter:
    pass

    def __init__(self, encoding: str = "utf-8") -> None:
        super().__init__()
        self.encoding = encoding

    def write_csv(self, result: ExportResult, output_dir: Path) -> Path:
        path = output_dir / result.file_name
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the CRLF record separators untouched.
            with path.open("w", encoding=self.encoding, newline="") as handle:
                handle.write(result.csv_content)
        except OSError as exc:
            raise ExportWriteError(
                f"Failed to write CSV export {path}: {exc}"
            ) from exc
        return path

    def write_workbook(
        self,
        rows: Sequence[Mapping[str, str]],
        mappings: Sequence[FieldMapping],
        record_type: RecordType,
        profiles: Sequence[ColumnProfile],
        output_dir: Path,
    ) -> Path:
        content = write_workbench_xlsx(rows, mappings, record_type, profiles)
        path = output_dir / workbook_file_name(record_type)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            raise ExportWriteError(
                f"Failed to write workbook {path}: {exc}"
            ) from exc
        return path
