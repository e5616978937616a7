"""File input/output adapters."""

from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DataValidationError,
    ExportWriteError,
    WorkbenchInfrastructureError,
)
from .export_writer import ExportFileWriter
from .upload_reader import UploadReader, UploadReadOptions
from .workbook_writer import (
    build_workbench_workbook,
    workbook_file_name,
    write_workbench_xlsx,
)

__all__ = [
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DataValidationError",
    "ExportFileWriter",
    "ExportWriteError",
    "UploadReadOptions",
    "UploadReader",
    "WorkbenchInfrastructureError",
    "build_workbench_workbook",
    "workbook_file_name",
    "write_workbench_xlsx",
]
