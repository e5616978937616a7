"""JSON-file store for saved mapping templates.

Each user owns one document, ``<root>/<user>.json``, holding all of that
user's templates in the camelCase shape the hosted store uses.
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
import re
import uuid

from pydantic import BaseModel, Field, ValidationError

from ...domain.catalog.registry import resolve_record_type
from ...domain.entities.mapping import FieldMapping, MappingTemplate
from ...domain.entities.record_type import RecordType
from ..io.exceptions import DataParseError, DataSourceNotFoundError

_UNSAFE_USER_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]")


class MappingTemplateLoadError(DataParseError):
    pass


class MappingTemplateSaveError(DataParseError):
    pass


class MappingTemplateNotFoundError(DataSourceNotFoundError):
    pass


class _TemplateDocument(BaseModel):
    templates: list[MappingTemplate] = Field(default_factory=list)


def _now() -> datetime:
    return datetime.now(UTC)


class JsonMappingTemplateRepository:
    pass

    def __init__(self, root_dir: Path) -> None:
        super().__init__()
        self.root_dir = root_dir

    def list_templates(self, user_id: str) -> list[MappingTemplate]:
        document = self._load(user_id)
        return sorted(document.templates, key=lambda t: t.updated_at, reverse=True)

    def get_template(self, user_id: str, template_id: str) -> MappingTemplate:
        for template in self._load(user_id).templates:
            if template.id == template_id:
                return template
        raise MappingTemplateNotFoundError(
            f"Mapping template {template_id!r} not found for user {user_id!r}"
        )

    def find_by_name(self, user_id: str, name: str) -> MappingTemplate | None:
        for template in self.list_templates(user_id):
            if template.name == name:
                return template
        return None

    def create_template(
        self,
        user_id: str,
        *,
        name: str,
        record_type: RecordType | str,
        mappings: Sequence[FieldMapping],
    ) -> str:
        document = self._load(user_id)
        now = _now()
        template = MappingTemplate(
            id=uuid.uuid4().hex,
            user_id=user_id,
            name=name,
            record_type=resolve_record_type(record_type),
            mappings=[m.model_copy() for m in mappings],
            created_at=now,
            updated_at=now,
        )
        document.templates.append(template)
        self._save(user_id, document)
        return template.id

    def update_template(
        self,
        user_id: str,
        template_id: str,
        *,
        name: str | None = None,
        record_type: RecordType | str | None = None,
        mappings: Sequence[FieldMapping] | None = None,
    ) -> MappingTemplate:
        document = self._load(user_id)
        for index, template in enumerate(document.templates):
            if template.id != template_id:
                continue
            changes: dict[str, object] = {"updated_at": _now()}
            if name is not None:
                changes["name"] = name
            if record_type is not None:
                changes["record_type"] = resolve_record_type(record_type)
            if mappings is not None:
                changes["mappings"] = [m.model_copy() for m in mappings]
            updated = template.model_copy(update=changes)
            document.templates[index] = updated
            self._save(user_id, document)
            return updated
        raise MappingTemplateNotFoundError(
            f"Mapping template {template_id!r} not found for user {user_id!r}"
        )

    def delete_template(self, user_id: str, template_id: str) -> None:
        document = self._load(user_id)
        remaining = [t for t in document.templates if t.id != template_id]
        if len(remaining) == len(document.templates):
            raise MappingTemplateNotFoundError(
                f"Mapping template {template_id!r} not found for user {user_id!r}"
            )
        document.templates = remaining
        self._save(user_id, document)

    def _path_for(self, user_id: str) -> Path:
        if not user_id or not user_id.strip():
            raise ValueError("Not authenticated: a user id is required")
        safe = _UNSAFE_USER_CHARS_RE.sub("_", user_id.strip())
        return self.root_dir / f"{safe}.json"

    def _load(self, user_id: str) -> _TemplateDocument:
        path = self._path_for(user_id)
        if not path.exists():
            return _TemplateDocument()
        try:
            return _TemplateDocument.model_validate_json(
                path.read_text(encoding="utf-8")
            )
        except ValidationError as exc:
            raise MappingTemplateLoadError(
                f"Invalid mapping template store {path}: {exc}"
            ) from exc
        except OSError as exc:
            raise MappingTemplateLoadError(
                f"Failed to read mapping template store {path}: {exc}"
            ) from exc

    def _save(self, user_id: str, document: _TemplateDocument) -> None:
        path = self._path_for(user_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                document.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
            )
        except OSError as exc:
            raise MappingTemplateSaveError(
                f"Failed to save mapping template store {path}: {exc}"
            ) from exc
