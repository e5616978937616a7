from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from ..application.workbench_use_case import WorkbenchDependencies, WorkbenchUseCase
from ..constants import Defaults
from .io.export_writer import ExportFileWriter
from .io.upload_reader import UploadReader, UploadReadOptions
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.mapping_template_repository import JsonMappingTemplateRepository

if TYPE_CHECKING:
    from ..application.ports.repositories import MappingTemplateRepositoryPort
    from ..application.ports.services import (
        ExportWriterPort,
        LoggerPort,
        UploadReaderPort,
    )
    from ..config import WorkbenchConfig


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: WorkbenchConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config
        self._logger_instance: LoggerPort | None = None
        self._upload_reader_instance: UploadReaderPort | None = None
        self._export_writer_instance: ExportWriterPort | None = None
        self._template_repository_instance: MappingTemplateRepositoryPort | None = None

    @property
    def csv_encoding(self) -> str:
        if self.config is None:
            return Defaults.CSV_ENCODING
        return self.config.csv_encoding

    @property
    def template_dir(self) -> Path:
        if self.config is None:
            return Path(Defaults.TEMPLATE_DIR)
        return self.config.template_dir

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_upload_reader(self) -> UploadReaderPort:
        if self._upload_reader_instance is None:
            self._upload_reader_instance = UploadReader(
                UploadReadOptions(encoding=self.csv_encoding)
            )
        return self._upload_reader_instance

    def create_export_writer(self) -> ExportWriterPort:
        if self._export_writer_instance is None:
            self._export_writer_instance = ExportFileWriter(encoding=self.csv_encoding)
        return self._export_writer_instance

    def create_template_repository(self) -> MappingTemplateRepositoryPort:
        if self._template_repository_instance is None:
            self._template_repository_instance = JsonMappingTemplateRepository(
                self.template_dir
            )
        return self._template_repository_instance

    def create_workbench_use_case(self) -> WorkbenchUseCase:
        dependencies = WorkbenchDependencies(
            logger=self.create_logger(),
            upload_reader=self.create_upload_reader(),
            export_writer=self.create_export_writer(),
            template_repository=self.create_template_repository(),
        )
        return WorkbenchUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._upload_reader_instance = None
        self._export_writer_instance = None
        self._template_repository_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger


def create_default_container(
    verbose: int = 0, config: WorkbenchConfig | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, config=config)
