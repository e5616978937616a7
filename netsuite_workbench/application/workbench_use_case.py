"""Upload-to-import-file orchestration.

The use case wires the pure workbench services to the file, workbook and
template adapters it is given. Upstream failures (unreadable uploads, store
or write errors) end up in ``response.errors``; validation issues only ever
appear on the export result.
"""

from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from ..domain.catalog.registry import fields_for
from ..domain.entities.mapping import FieldMapping, blank_mappings, restore_mappings
from ..domain.entities.record_type import RecordType
from ..domain.services.auto_matcher import auto_match
from ..domain.services.column_profiler import profile_columns
from ..domain.services.export_builder import generate_export
from .models import (
    ExportWorkbenchResponse,
    ProfileUploadResponse,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ..domain.entities.mapping import MappingTemplate
    from ..domain.entities.upload import UploadedTable
    from .models import ExportWorkbenchRequest, ProfileUploadRequest
    from .ports.repositories import MappingTemplateRepositoryPort
    from .ports.services import ExportWriterPort, LoggerPort, UploadReaderPort

VERBOSE_TRACEBACK_LEVEL = 2


@dataclass(slots=True)
class WorkbenchDependencies:
    logger: LoggerPort
    upload_reader: UploadReaderPort
    export_writer: ExportWriterPort
    template_repository: MappingTemplateRepositoryPort | None = None


class WorkbenchUseCase:
    pass

    def __init__(self, dependencies: WorkbenchDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._upload_reader = dependencies.upload_reader
        self._export_writer = dependencies.export_writer
        self._template_repository = dependencies.template_repository

    def profile(self, request: ProfileUploadRequest) -> ProfileUploadResponse:
        response = ProfileUploadResponse()
        try:
            table = self._read(request.file_path)
            response.table = table
            response.profiles = profile_columns(table.headers, table.rows)
            self.logger.log_profiles(response.profiles)
        except Exception as exc:
            self._fail(response, exc, verbose=request.verbose)
        return response

    def execute(self, request: ExportWorkbenchRequest) -> ExportWorkbenchResponse:
        response = ExportWorkbenchResponse()
        try:
            table = self._read(request.file_path)
            response.table = table
            response.profiles = profile_columns(table.headers, table.rows)
            self.logger.log_profiles(response.profiles)

            template = self._find_template(request)
            record_type = self._resolve_record_type(request, template)
            response.record_type = record_type

            mappings = self._initial_mappings(table, template)
            mappings = self._apply_overrides(
                mappings, request.mapping_overrides, response
            )
            if request.auto_match:
                before = sum(1 for m in mappings if m.is_mapped)
                mappings = auto_match(mappings, fields_for(record_type))
                response.auto_matched = sum(1 for m in mappings if m.is_mapped) - before
            response.mappings = mappings
            self.logger.log_mapping_summary(
                response.mapped_count,
                len(mappings),
                record_type=record_type.value,
                auto_matched=response.auto_matched,
            )

            export = generate_export(
                table.rows, mappings, record_type, timestamp_ms=request.timestamp_ms
            )
            response.export = export
            self.logger.log_issues(export.issues)

            csv_path = self._export_writer.write_csv(export, request.output_dir)
            response.csv_path = csv_path
            self.logger.log_file_written(csv_path, "CSV import file")
            if request.write_workbook:
                response.workbook_path = self._export_writer.write_workbook(
                    table.rows,
                    mappings,
                    record_type,
                    response.profiles,
                    request.output_dir,
                )
                self.logger.log_file_written(response.workbook_path, "workbook")

            if request.save_template_as:
                response.template_id = self._save_template(
                    request.user_id, request.save_template_as, record_type, mappings
                )
        except Exception as exc:
            self._fail(response, exc, verbose=request.verbose)
        return response

    def _read(self, file_path: Path) -> UploadedTable:
        table = self._upload_reader.read(file_path)
        self.logger.log_upload_loaded(
            table.file_name, row_count=table.row_count, column_count=table.column_count
        )
        return table

    def _find_template(self, request: ExportWorkbenchRequest) -> MappingTemplate | None:
        if not request.template_name:
            return None
        if self._template_repository is None:
            raise RuntimeError("No mapping template store is configured")
        template = self._template_repository.find_by_name(
            request.user_id, request.template_name
        )
        if template is None:
            raise LookupError(
                f"Mapping template {request.template_name!r} not found "
                f"for user {request.user_id!r}"
            )
        self.logger.verbose(
            f"Loaded mapping template {template.name!r} ({template.record_type.value})"
        )
        return template

    @staticmethod
    def _resolve_record_type(
        request: ExportWorkbenchRequest, template: MappingTemplate | None
    ) -> RecordType:
        if request.record_type is not None:
            return request.record_type
        if template is not None:
            return template.record_type
        return RecordType.CUSTOMER

    @staticmethod
    def _initial_mappings(
        table: UploadedTable, template: MappingTemplate | None
    ) -> list[FieldMapping]:
        if template is None:
            return blank_mappings(table.headers)
        return restore_mappings(template.mappings, table.headers)

    def _apply_overrides(
        self,
        mappings: Sequence[FieldMapping],
        overrides: Sequence[FieldMapping],
        response: ExportWorkbenchResponse,
    ) -> list[FieldMapping]:
        by_source = {m.source_column: m for m in overrides}
        known = {m.source_column for m in mappings}
        for source in by_source:
            if source not in known:
                message = f"Column {source!r} is not in the upload; mapping ignored"
                response.warnings.append(message)
                self.logger.warning(message)
        return [by_source.get(m.source_column, m) for m in mappings]

    def _save_template(
        self,
        user_id: str,
        name: str,
        record_type: RecordType,
        mappings: Sequence[FieldMapping],
    ) -> str:
        if self._template_repository is None:
            raise RuntimeError("No mapping template store is configured")
        existing = self._template_repository.find_by_name(user_id, name)
        if existing is not None:
            self._template_repository.update_template(
                user_id, existing.id, record_type=record_type, mappings=mappings
            )
            self.logger.success(f"Updated mapping template {name!r}")
            return existing.id
        template_id = self._template_repository.create_template(
            user_id, name=name, record_type=record_type, mappings=mappings
        )
        self.logger.success(f"Saved mapping template {name!r}")
        return template_id

    def _fail(
        self,
        response: ExportWorkbenchResponse | ProfileUploadResponse,
        exc: Exception,
        *,
        verbose: int,
    ) -> None:
        response.success = False
        response.errors.append(str(exc))
        self.logger.error(str(exc))
        if verbose >= VERBOSE_TRACEBACK_LEVEL:
            self.logger.error(traceback.format_exc())
