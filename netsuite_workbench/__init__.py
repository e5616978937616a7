"""NetSuite data workbench.

Turns arbitrary CSV and Excel uploads into NetSuite CSV import files:

- Column profiling with type detection
- A catalog of NetSuite record types and their import fields
- Manual and automatic column-to-field mapping with value transforms
- Validation against required fields and CSV export
- Multi-sheet Excel workbook of profile, mappings, data and issues
- Saved mapping templates per user
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("netsuite-workbench")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from netsuite_workbench.domain.catalog.registry import (
    fields_for,
    list_record_types,
    required_fields_for,
)
from netsuite_workbench.domain.entities.mapping import FieldMapping, TransformName
from netsuite_workbench.domain.entities.record_type import RecordType
from netsuite_workbench.domain.services.auto_matcher import auto_match
from netsuite_workbench.domain.services.column_profiler import profile_columns
from netsuite_workbench.domain.services.export_builder import generate_export

__all__ = [
    "__version__",
    # Catalog
    "RecordType",
    "fields_for",
    "list_record_types",
    "required_fields_for",
    # Mapping
    "FieldMapping",
    "TransformName",
    "auto_match",
    # Profiling and export
    "generate_export",
    "profile_columns",
]
