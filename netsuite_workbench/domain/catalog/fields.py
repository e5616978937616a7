"""NetSuite field definitions for the supported CSV import record types.

Field ids are the internal ids NetSuite uses in its CSV Import Assistant;
labels are what the import assistant (and the exported header row) shows.
Order matters: auto-matching takes the first field that fits.
"""

from ..entities.record_type import FieldDef, FieldType, RecordType

_T = FieldType

CUSTOMER_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("companyname", "Company Name", True, _T.TEXT),
    FieldDef("email", "Email", True, _T.EMAIL),
    FieldDef("entityid", "Customer ID", False, _T.TEXT),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("isperson", "Individual", False, _T.CHECKBOX),
    FieldDef("firstname", "First Name", False, _T.TEXT),
    FieldDef("lastname", "Last Name", False, _T.TEXT),
    FieldDef("phone", "Phone", False, _T.PHONE),
    FieldDef("altphone", "Alt. Phone", False, _T.PHONE),
    FieldDef("fax", "Fax", False, _T.PHONE),
    FieldDef("url", "Web Address", False, _T.URL),
    FieldDef("subsidiary", "Subsidiary", False, _T.SELECT),
    FieldDef("category", "Category", False, _T.SELECT),
    FieldDef("salesrep", "Sales Rep", False, _T.SELECT),
    FieldDef("terms", "Terms", False, _T.SELECT),
    FieldDef("currency", "Currency", False, _T.SELECT),
    FieldDef("creditlimit", "Credit Limit", False, _T.CURRENCY),
    FieldDef("taxable", "Taxable", False, _T.CHECKBOX),
    FieldDef("addr1", "Address 1", False, _T.TEXT),
    FieldDef("addr2", "Address 2", False, _T.TEXT),
    FieldDef("city", "City", False, _T.TEXT),
    FieldDef("state", "State/Province", False, _T.TEXT),
    FieldDef("zip", "Zip", False, _T.TEXT),
    FieldDef("country", "Country", False, _T.SELECT),
    FieldDef("comments", "Comments", False, _T.TEXTAREA),
)

VENDOR_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("companyname", "Company Name", True, _T.TEXT),
    FieldDef("subsidiary", "Subsidiary", True, _T.SELECT),
    FieldDef("entityid", "Vendor ID", False, _T.TEXT),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("isperson", "Individual", False, _T.CHECKBOX),
    FieldDef("email", "Email", False, _T.EMAIL),
    FieldDef("phone", "Phone", False, _T.PHONE),
    FieldDef("fax", "Fax", False, _T.PHONE),
    FieldDef("url", "Web Address", False, _T.URL),
    FieldDef("category", "Category", False, _T.SELECT),
    FieldDef("terms", "Terms", False, _T.SELECT),
    FieldDef("currency", "Currency", False, _T.SELECT),
    FieldDef("taxidnum", "Tax ID", False, _T.TEXT),
    FieldDef("is1099eligible", "1099 Eligible", False, _T.CHECKBOX),
    FieldDef("accountnumber", "Account", False, _T.TEXT),
    FieldDef("addr1", "Address 1", False, _T.TEXT),
    FieldDef("city", "City", False, _T.TEXT),
    FieldDef("state", "State/Province", False, _T.TEXT),
    FieldDef("zip", "Zip", False, _T.TEXT),
    FieldDef("country", "Country", False, _T.SELECT),
    FieldDef("comments", "Comments", False, _T.TEXTAREA),
)

INVENTORY_ITEM_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("itemid", "Item Name/Number", True, _T.TEXT),
    FieldDef("subsidiary", "Subsidiary", True, _T.SELECT),
    FieldDef("taxschedule", "Tax Schedule", True, _T.SELECT),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("displayname", "Display Name/Code", False, _T.TEXT),
    FieldDef("upccode", "UPC Code", False, _T.TEXT),
    FieldDef("salesdescription", "Sales Description", False, _T.TEXTAREA),
    FieldDef("purchasedescription", "Purchase Description", False, _T.TEXTAREA),
    FieldDef("baseprice", "Base Price", False, _T.CURRENCY),
    FieldDef("cost", "Purchase Price", False, _T.CURRENCY),
    FieldDef("vendorname", "Vendor Name/Code", False, _T.TEXT),
    FieldDef("stockunit", "Stock Unit", False, _T.SELECT),
    FieldDef("weight", "Item Weight", False, _T.DECIMAL),
    FieldDef("reorderpoint", "Reorder Point", False, _T.INTEGER),
    FieldDef("preferredstocklevel", "Preferred Stock Level", False, _T.INTEGER),
    FieldDef("location", "Location", False, _T.SELECT),
    FieldDef("incomeaccount", "Income Account", False, _T.SELECT),
    FieldDef("cogsaccount", "COGS Account", False, _T.SELECT),
    FieldDef("assetaccount", "Asset Account", False, _T.SELECT),
    FieldDef("isinactive", "Inactive", False, _T.CHECKBOX),
)

SALES_ORDER_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("entity", "Customer", True, _T.SELECT),
    FieldDef("trandate", "Date", True, _T.DATE),
    FieldDef("item", "Item", True, _T.SELECT),
    FieldDef("quantity", "Quantity", True, _T.DECIMAL),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("tranid", "Order #", False, _T.TEXT),
    FieldDef("otherrefnum", "PO #", False, _T.TEXT),
    FieldDef("rate", "Rate", False, _T.CURRENCY),
    FieldDef("amount", "Amount", False, _T.CURRENCY),
    FieldDef("subsidiary", "Subsidiary", False, _T.SELECT),
    FieldDef("location", "Location", False, _T.SELECT),
    FieldDef("department", "Department", False, _T.SELECT),
    FieldDef("class", "Class", False, _T.SELECT),
    FieldDef("terms", "Terms", False, _T.SELECT),
    FieldDef("shipdate", "Ship Date", False, _T.DATE),
    FieldDef("salesrep", "Sales Rep", False, _T.SELECT),
    FieldDef("memo", "Memo", False, _T.TEXT),
)

PURCHASE_ORDER_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("entity", "Vendor", True, _T.SELECT),
    FieldDef("trandate", "Date", True, _T.DATE),
    FieldDef("item", "Item", True, _T.SELECT),
    FieldDef("quantity", "Quantity", True, _T.DECIMAL),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("tranid", "PO #", False, _T.TEXT),
    FieldDef("rate", "Rate", False, _T.CURRENCY),
    FieldDef("amount", "Amount", False, _T.CURRENCY),
    FieldDef("subsidiary", "Subsidiary", False, _T.SELECT),
    FieldDef("currency", "Currency", False, _T.SELECT),
    FieldDef("location", "Location", False, _T.SELECT),
    FieldDef("department", "Department", False, _T.SELECT),
    FieldDef("duedate", "Receive By", False, _T.DATE),
    FieldDef("employee", "Employee", False, _T.SELECT),
    FieldDef("memo", "Memo", False, _T.TEXT),
)

JOURNAL_ENTRY_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("trandate", "Date", True, _T.DATE),
    FieldDef("subsidiary", "Subsidiary", True, _T.SELECT),
    FieldDef("account", "Account", True, _T.SELECT),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("tranid", "Entry No.", False, _T.TEXT),
    FieldDef("debit", "Debit", False, _T.CURRENCY),
    FieldDef("credit", "Credit", False, _T.CURRENCY),
    FieldDef("entity", "Name", False, _T.SELECT),
    FieldDef("currency", "Currency", False, _T.SELECT),
    FieldDef("exchangerate", "Exchange Rate", False, _T.DECIMAL),
    FieldDef("department", "Department", False, _T.SELECT),
    FieldDef("class", "Class", False, _T.SELECT),
    FieldDef("location", "Location", False, _T.SELECT),
    FieldDef("reversaldate", "Reversal Date", False, _T.DATE),
    FieldDef("memo", "Memo", False, _T.TEXT),
)

CONTACT_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("firstname", "First Name", True, _T.TEXT),
    FieldDef("lastname", "Last Name", True, _T.TEXT),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("email", "Email", False, _T.EMAIL),
    FieldDef("phone", "Main Phone", False, _T.PHONE),
    FieldDef("officephone", "Office Phone", False, _T.PHONE),
    FieldDef("mobilephone", "Mobile Phone", False, _T.PHONE),
    FieldDef("title", "Job Title", False, _T.TEXT),
    FieldDef("company", "Company", False, _T.SELECT),
    FieldDef("subsidiary", "Subsidiary", False, _T.SELECT),
    FieldDef("contactrole", "Role", False, _T.SELECT),
    FieldDef("comments", "Comments", False, _T.TEXTAREA),
)

EMPLOYEE_FIELDS: tuple[FieldDef, ...] = (
    FieldDef("firstname", "First Name", True, _T.TEXT),
    FieldDef("lastname", "Last Name", True, _T.TEXT),
    FieldDef("subsidiary", "Subsidiary", True, _T.SELECT),
    FieldDef("entityid", "Employee ID", False, _T.TEXT),
    FieldDef("externalid", "External ID", False, _T.TEXT),
    FieldDef("email", "Email", False, _T.EMAIL),
    FieldDef("phone", "Phone", False, _T.PHONE),
    FieldDef("title", "Job Title", False, _T.TEXT),
    FieldDef("supervisor", "Supervisor", False, _T.SELECT),
    FieldDef("department", "Department", False, _T.SELECT),
    FieldDef("location", "Location", False, _T.SELECT),
    FieldDef("employeetype", "Type", False, _T.SELECT),
    FieldDef("hiredate", "Hire Date", False, _T.DATE),
    FieldDef("isinactive", "Inactive", False, _T.CHECKBOX),
)

RECORD_TYPE_LABELS: dict[RecordType, str] = {
    RecordType.CUSTOMER: "Customer",
    RecordType.VENDOR: "Vendor",
    RecordType.INVENTORY_ITEM: "Inventory Item",
    RecordType.SALES_ORDER: "Sales Order",
    RecordType.PURCHASE_ORDER: "Purchase Order",
    RecordType.JOURNAL_ENTRY: "Journal Entry",
    RecordType.CONTACT: "Contact",
    RecordType.EMPLOYEE: "Employee",
}

FIELD_DEFINITIONS: dict[RecordType, tuple[FieldDef, ...]] = {
    RecordType.CUSTOMER: CUSTOMER_FIELDS,
    RecordType.VENDOR: VENDOR_FIELDS,
    RecordType.INVENTORY_ITEM: INVENTORY_ITEM_FIELDS,
    RecordType.SALES_ORDER: SALES_ORDER_FIELDS,
    RecordType.PURCHASE_ORDER: PURCHASE_ORDER_FIELDS,
    RecordType.JOURNAL_ENTRY: JOURNAL_ENTRY_FIELDS,
    RecordType.CONTACT: CONTACT_FIELDS,
    RecordType.EMPLOYEE: EMPLOYEE_FIELDS,
}
