from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_workbench_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer WORKBENCH_* settings out of the tests."""
    for name in (
        "WORKBENCH_TEMPLATE_DIR",
        "WORKBENCH_OUTPUT_DIR",
        "WORKBENCH_RECORD_TYPE",
        "WORKBENCH_USER",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def customer_rows() -> list[dict[str, str]]:
    return [
        {
            "Company Name": "Acme Corp",
            "E-Mail": "sales@acme.test",
            "Phone Number": "(555) 123-4567",
            "Notes": "key account",
        },
        {
            "Company Name": "Globex, Inc.",
            "E-Mail": "info@globex.test",
            "Phone Number": "555-987-6543",
            "Notes": "",
        },
        {
            "Company Name": "Initech",
            "E-Mail": "",
            "Phone Number": "+1 555 000 1111",
            "Notes": 'said "call back"',
        },
    ]


@pytest.fixture
def customer_csv(tmp_path: Path) -> Path:
    path = tmp_path / "customers.csv"
    path.write_text(
        "Company Name,E-Mail,Phone Number,Notes\r\n"
        "Acme Corp,sales@acme.test,(555) 123-4567,key account\r\n"
        '"Globex, Inc.",info@globex.test,555-987-6543,\r\n'
        'Initech,,+1 555 000 1111,"said ""call back"""\r\n',
        encoding="utf-8",
    )
    return path
