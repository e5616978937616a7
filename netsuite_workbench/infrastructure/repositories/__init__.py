"""Persistence adapters."""

from .mapping_template_repository import (
    JsonMappingTemplateRepository,
    MappingTemplateLoadError,
    MappingTemplateNotFoundError,
    MappingTemplateSaveError,
)

__all__ = [
    "JsonMappingTemplateRepository",
    "MappingTemplateLoadError",
    "MappingTemplateNotFoundError",
    "MappingTemplateSaveError",
]
