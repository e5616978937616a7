from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...domain.entities.mapping import FieldMapping, MappingTemplate
    from ...domain.entities.record_type import RecordType


@runtime_checkable
class MappingTemplateRepositoryPort(Protocol):
    pass

    def list_templates(self, user_id: str) -> list[MappingTemplate]: ...

    def get_template(self, user_id: str, template_id: str) -> MappingTemplate: ...

    def find_by_name(self, user_id: str, name: str) -> MappingTemplate | None: ...

    def create_template(
        self,
        user_id: str,
        *,
        name: str,
        record_type: RecordType | str,
        mappings: Sequence[FieldMapping],
    ) -> str: ...

    def update_template(
        self,
        user_id: str,
        template_id: str,
        *,
        name: str | None = None,
        record_type: RecordType | str | None = None,
        mappings: Sequence[FieldMapping] | None = None,
    ) -> MappingTemplate: ...

    def delete_template(self, user_id: str, template_id: str) -> None: ...
