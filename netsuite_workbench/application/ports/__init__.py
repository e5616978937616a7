"""Ports (protocols) implemented by the infrastructure layer."""

from .repositories import MappingTemplateRepositoryPort
from .services import ExportWriterPort, LoggerPort, UploadReaderPort

__all__ = [
    "ExportWriterPort",
    "LoggerPort",
    "MappingTemplateRepositoryPort",
    "UploadReaderPort",
]
