from typing import ClassVar


class Defaults:
    RECORD_TYPE = "customer"
    USER_ID = "local"
    TEMPLATE_DIR = ".workbench/templates"
    OUTPUT_DIR = "output"
    CSV_ENCODING = "utf-8"
    AUTO_MATCH = True
    WRITE_WORKBOOK = True


class Thresholds:
    TYPE_MAJORITY = 0.8
    TYPE_MIXED = 0.3
    TOP_VALUES_LIMIT = 5
    SAMPLE_VALUES_LIMIT = 5
    UNMAPPED_PREVIEW_LIMIT = 3
    WORKBOOK_TOP_VALUES = 3


class Patterns:
    EMAIL = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
    PHONE = r"^[0-9\s()+-]{7,20}$"
    DIGITS_AND_DOTS = r"^[\d.]+$"
    CURRENCY = r"^[$€£¥]?\s?[\d,]+\.?\d*$|^[\d,]+\.?\d*\s?[$€£¥]$"
    CURRENCY_SYMBOL = r"[$€£¥]"
    DATE_SHAPE = r"^\d{1,4}[/-]\d{1,2}[/-]\d{1,4}$"
    NUMERIC_TEXT = r"^[\s+\-.,\d]+$"
    NUMBER_NOISE = r"[$€£¥,\s]"
    NON_ALPHANUMERIC = r"[^a-z0-9]"
    NUMBER_CLEAN = r"[^0-9.\-]"


class BooleanValues:
    ALL: ClassVar[frozenset[str]] = frozenset(
        {"true", "false", "yes", "no", "1", "0", "t", "f", "y", "n"}
    )
    TRUTHY: ClassVar[tuple[str, ...]] = ("yes", "y", "1", "true", "t")
    FALSY: ClassVar[tuple[str, ...]] = ("no", "n", "0", "false", "f")


class WorkbookStyle:
    EMERALD_HEX = "10B981"
    AMBER_HEX = "F59E0B"
    RED_HEX = "EF4444"
    BORDER_HEX = "D1D5DB"
    WHITE_HEX = "FFFFFF"
    CREATOR = "NetSuite Data Workbench"


class SheetNames:
    PROFILE = "Data Profile"
    MAPPINGS = "Field Mappings"
    DATA = "Cleaned Data"
    ISSUES = "Validation Issues"


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
