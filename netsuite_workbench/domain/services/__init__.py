"""Pure services of the data workbench pipeline.

Every service here is a synchronous function over in-memory rows and
mappings; file and store access lives in ``netsuite_workbench.infrastructure``.
"""

from .auto_matcher import auto_match, normalize_name
from .column_profiler import profile_columns
from .export_builder import build_export_data, export_file_name, generate_export
from .transforms import TRANSFORM_OPTIONS, TRANSFORMS, apply_transform, get_transform
from .type_detector import detect_type

__all__ = [
    "TRANSFORMS",
    "TRANSFORM_OPTIONS",
    "apply_transform",
    "auto_match",
    "build_export_data",
    "detect_type",
    "export_file_name",
    "generate_export",
    "get_transform",
    "normalize_name",
    "profile_columns",
]
