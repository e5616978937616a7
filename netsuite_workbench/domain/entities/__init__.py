"""Entities of the data workbench."""

from .column_profile import ColumnProfile, DetectedColumnType, ValueFrequency
from .mapping import (
    FieldMapping,
    MappingTemplate,
    TransformName,
    blank_mappings,
    restore_mappings,
    used_targets,
)
from .record_type import FieldDef, FieldType, RecordType
from .upload import UploadedTable
from .validation import ExportData, ExportResult, IssueSeverity, ValidationIssue

__all__ = [
    "ColumnProfile",
    "DetectedColumnType",
    "ExportData",
    "ExportResult",
    "FieldDef",
    "FieldMapping",
    "FieldType",
    "IssueSeverity",
    "MappingTemplate",
    "RecordType",
    "TransformName",
    "UploadedTable",
    "ValidationIssue",
    "ValueFrequency",
    "blank_mappings",
    "restore_mappings",
    "used_targets",
]
