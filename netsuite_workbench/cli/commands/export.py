"""Export command: turn an upload into a NetSuite CSV import file.

A thin adapter between click and ``WorkbenchUseCase``. It parses the
options, layers them over the runtime config, runs the use case and
renders the mapping and validation tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import ExportWorkbenchRequest
from ...config import ConfigLoader
from ...domain.entities.mapping import FieldMapping, TransformName
from ...domain.entities.record_type import RecordType
from ...infrastructure.container import DependencyContainer
from ..presenters.export_summary import ExportSummaryPresenter
from .catalog import RECORD_TYPE_CHOICE

console = Console()


def parse_mapping_option(value: str) -> FieldMapping:
    """Parse ``SOURCE=FIELD[:TRANSFORM]`` into a mapping.

    An empty FIELD clears the mapping for SOURCE (auto-matching may refill it).
    """
    source, sep, target = value.rpartition("=")
    if not sep or not source:
        raise click.BadParameter(
            f"Expected SOURCE=FIELD[:TRANSFORM], got {value!r}", param_hint="--map"
        )
    field_id, _, transform = target.partition(":")
    transform = transform.strip()
    if transform and transform not in {t.value for t in TransformName}:
        raise click.BadParameter(
            f"Unknown transform {transform!r}", param_hint="--map"
        )
    return FieldMapping(
        source_column=source,
        target_field=field_id.strip(),
        transform=transform or TransformName.NONE,
    )


@dataclass(frozen=True)
class ExportCommandOptions:
    record_type: str | None
    mappings: tuple[str, ...]
    template_name: str | None
    user_id: str | None
    auto_match: bool | None
    write_workbook: bool | None
    output_dir: Path | None
    save_template_as: str | None
    fail_on_errors: bool
    config_file: Path | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ExportCommandOptions:
        return cls(
            record_type=cast("str | None", options.get("record_type")),
            mappings=cast("tuple[str, ...]", options.get("mappings") or ()),
            template_name=cast("str | None", options.get("template_name")),
            user_id=cast("str | None", options.get("user_id")),
            auto_match=cast("bool | None", options.get("auto_match")),
            write_workbook=cast("bool | None", options.get("write_workbook")),
            output_dir=cast("Path | None", options.get("output_dir")),
            save_template_as=cast("str | None", options.get("save_template_as")),
            fail_on_errors=cast("bool", options["fail_on_errors"]),
            config_file=cast("Path | None", options.get("config_file")),
            verbose=cast("int", options["verbose"]),
        )


@click.command()
@click.argument(
    "file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--record-type",
    "record_type",
    type=RECORD_TYPE_CHOICE,
    help="NetSuite record type to export (default: from config or template)",
)
@click.option(
    "--map",
    "mappings",
    multiple=True,
    metavar="SRC=FIELD[:TRANSFORM]",
    help="Map a source column to a NetSuite field id, optionally with a transform",
)
@click.option("--template", "template_name", help="Start from a saved mapping template")
@click.option("--user", "user_id", help="Owner of the mapping templates")
@click.option(
    "--auto-match/--no-auto-match",
    "auto_match",
    default=None,
    help="Map unmapped columns whose names look like catalog fields",
)
@click.option(
    "--xlsx/--no-xlsx",
    "write_workbook",
    default=None,
    help="Also write the multi-sheet workbench workbook",
)
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the generated files (default: from config)",
)
@click.option(
    "--save-template",
    "save_template_as",
    help="Save the final mappings as a named template",
)
@click.option(
    "--fail-on-errors",
    is_flag=True,
    default=False,
    help="Exit non-zero when the export has validation errors",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a netsuite_workbench.toml config file",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def export_command(file_path: Path, **options: object) -> None:
    """Map FILE_PATH onto a NetSuite record type and write the import CSV.

    Examples:

    \b
        # Customer import with automatic column matching
        netsuite-workbench export customers.csv --record-type customer

    \b
        # Explicit mappings with value transforms
        netsuite-workbench export orders.xlsx --record-type salesOrder \\
            --map "Order Date=trandate:date-mm/dd/yyyy" --map "Qty=quantity"

    \b
        # Reuse and update a saved template
        netsuite-workbench export customers.csv --template crm --save-template crm
    """
    command_options = ExportCommandOptions.from_kwargs(dict(options))
    runtime_config = ConfigLoader.load(config_file=command_options.config_file)

    overrides = [parse_mapping_option(value) for value in command_options.mappings]
    record_type: RecordType | None = None
    if command_options.record_type is not None:
        record_type = RecordType(command_options.record_type)
    elif command_options.template_name is None:
        record_type = runtime_config.record_type

    request = ExportWorkbenchRequest(
        file_path=file_path,
        output_dir=command_options.output_dir or runtime_config.output_dir,
        record_type=record_type,
        user_id=command_options.user_id or runtime_config.default_user,
        template_name=command_options.template_name,
        mapping_overrides=overrides,
        auto_match=(
            runtime_config.auto_match
            if command_options.auto_match is None
            else command_options.auto_match
        ),
        write_workbook=(
            runtime_config.write_workbook
            if command_options.write_workbook is None
            else command_options.write_workbook
        ),
        save_template_as=command_options.save_template_as,
        verbose=command_options.verbose,
    )

    container = DependencyContainer(
        verbose=command_options.verbose, console=console, config=runtime_config
    )
    use_case = container.create_workbench_use_case()
    response = use_case.execute(request)

    ExportSummaryPresenter(console).present(response)
    container.create_logger().log_final_stats()

    if not response.success:
        raise click.ClickException(
            "Export failed: " + "; ".join(response.errors)
        )
    if command_options.fail_on_errors and response.has_validation_errors:
        raise click.ClickException("Export has validation errors")
