"""Run the workbench CLI with ``python -m netsuite_workbench``."""

from .cli import app

if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
