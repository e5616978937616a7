from dataclasses import dataclass
from enum import StrEnum
import re

_CAMEL_BOUNDARY_RE = re.compile("([A-Z])")


class RecordType(StrEnum):
    CUSTOMER = "customer"
    VENDOR = "vendor"
    INVENTORY_ITEM = "inventoryItem"
    SALES_ORDER = "salesOrder"
    PURCHASE_ORDER = "purchaseOrder"
    JOURNAL_ENTRY = "journalEntry"
    CONTACT = "contact"
    EMPLOYEE = "employee"

    @property
    def slug(self) -> str:
        """Kebab-cased value for file names, e.g. ``sales-order``."""
        return _CAMEL_BOUNDARY_RE.sub(r"-\1", self.value).lower()


class FieldType(StrEnum):
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    DATE = "date"
    CURRENCY = "currency"
    INTEGER = "integer"
    DECIMAL = "decimal"
    CHECKBOX = "checkbox"
    SELECT = "select"


@dataclass(frozen=True, slots=True)
class FieldDef:
    field_id: str
    label: str
    required: bool = False
    type: FieldType = FieldType.TEXT
