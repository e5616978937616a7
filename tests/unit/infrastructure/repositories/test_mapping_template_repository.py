"""Tests for the JSON-file mapping template store."""

import json

import pytest

from netsuite_workbench.domain.entities.mapping import FieldMapping, TransformName
from netsuite_workbench.domain.entities.record_type import RecordType
from netsuite_workbench.infrastructure.io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
)
from netsuite_workbench.infrastructure.repositories import (
    JsonMappingTemplateRepository,
    MappingTemplateLoadError,
    MappingTemplateNotFoundError,
)

MAPPINGS = [
    FieldMapping(source_column="Name", target_field="companyname"),
    FieldMapping(
        source_column="Mail",
        target_field="email",
        transform="trim-lowercase",
    ),
    FieldMapping(source_column="Notes"),
]


@pytest.fixture
def repository(tmp_path):
    return JsonMappingTemplateRepository(tmp_path / "templates")


class TestCreateAndRead:
    def test_create_then_get(self, repository):
        # Act
        template_id = repository.create_template(
            "alice", name="CRM", record_type="customer", mappings=MAPPINGS
        )
        template = repository.get_template("alice", template_id)

        # Assert
        assert template.name == "CRM"
        assert template.user_id == "alice"
        assert template.record_type is RecordType.CUSTOMER
        assert template.mappings == MAPPINGS
        assert template.mappings[1].transform is TransformName.TRIM_LOWERCASE
        assert template.created_at == template.updated_at

    def test_list_is_empty_for_new_user(self, repository):
        assert repository.list_templates("bob") == []

    def test_list_newest_first(self, repository):
        first = repository.create_template(
            "alice", name="first", record_type="customer", mappings=[]
        )
        second = repository.create_template(
            "alice", name="second", record_type="vendor", mappings=[]
        )
        repository.update_template("alice", first, name="first v2")

        ids = [t.id for t in repository.list_templates("alice")]

        assert ids == [first, second]

    def test_templates_are_per_user(self, repository):
        repository.create_template(
            "alice", name="CRM", record_type="customer", mappings=MAPPINGS
        )

        assert repository.list_templates("bob") == []
        assert repository.find_by_name("bob", "CRM") is None
        assert repository.find_by_name("alice", "CRM") is not None

    def test_store_uses_camel_case_json(self, repository, tmp_path):
        repository.create_template(
            "alice", name="CRM", record_type="salesOrder", mappings=MAPPINGS
        )

        document = json.loads((tmp_path / "templates" / "alice.json").read_text())

        template = document["templates"][0]
        assert template["recordType"] == "salesOrder"
        assert template["userId"] == "alice"
        assert template["mappings"][1] == {
            "sourceColumn": "Mail",
            "targetField": "email",
            "transform": "trim-lowercase",
        }
        assert "createdAt" in template
        assert "updatedAt" in template

    def test_user_id_is_sanitized_for_file_names(self, repository, tmp_path):
        repository.create_template(
            "../evil user", name="x", record_type="customer", mappings=[]
        )

        assert (tmp_path / "templates" / ".._evil_user.json").exists()


class TestUpdateAndDelete:
    def test_update_replaces_mappings(self, repository):
        template_id = repository.create_template(
            "alice", name="CRM", record_type="customer", mappings=MAPPINGS
        )
        created = repository.get_template("alice", template_id)

        updated = repository.update_template(
            "alice",
            template_id,
            record_type=RecordType.VENDOR,
            mappings=MAPPINGS[:1],
        )

        assert updated.name == "CRM"
        assert updated.record_type is RecordType.VENDOR
        assert updated.mappings == MAPPINGS[:1]
        assert updated.updated_at >= created.updated_at
        assert repository.get_template("alice", template_id) == updated

    def test_delete(self, repository):
        template_id = repository.create_template(
            "alice", name="CRM", record_type="customer", mappings=MAPPINGS
        )

        repository.delete_template("alice", template_id)

        assert repository.list_templates("alice") == []

    def test_missing_template(self, repository):
        with pytest.raises(MappingTemplateNotFoundError):
            repository.get_template("alice", "nope")
        with pytest.raises(MappingTemplateNotFoundError):
            repository.update_template("alice", "nope", name="x")
        with pytest.raises(DataSourceNotFoundError):
            repository.delete_template("alice", "nope")


class TestErrors:
    def test_blank_user_is_rejected(self, repository):
        with pytest.raises(ValueError, match="Not authenticated"):
            repository.list_templates("  ")

    def test_unknown_record_type(self, repository):
        with pytest.raises(ValueError, match="Unknown record type"):
            repository.create_template(
                "alice", name="x", record_type="lead", mappings=[]
            )

    def test_corrupt_store(self, repository, tmp_path):
        store = tmp_path / "templates" / "alice.json"
        store.parent.mkdir(parents=True)
        store.write_text("{not json", encoding="utf-8")

        with pytest.raises(MappingTemplateLoadError) as excinfo:
            repository.list_templates("alice")

        assert isinstance(excinfo.value, DataParseError)
