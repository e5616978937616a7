"""Tests for the workbench use case.

The file adapters are real (tmp_path); the logger is silent.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import Mock

from openpyxl import load_workbook
import pytest

from netsuite_workbench.application.models import (
    ExportWorkbenchRequest,
    ProfileUploadRequest,
)
from netsuite_workbench.application.workbench_use_case import (
    WorkbenchDependencies,
    WorkbenchUseCase,
)
from netsuite_workbench.domain.entities.column_profile import DetectedColumnType
from netsuite_workbench.domain.entities.mapping import FieldMapping
from netsuite_workbench.domain.entities.record_type import RecordType
from netsuite_workbench.infrastructure.io import ExportFileWriter, UploadReader
from netsuite_workbench.infrastructure.logging import NullLogger
from netsuite_workbench.infrastructure.repositories import (
    JsonMappingTemplateRepository,
)


@pytest.fixture
def repository(tmp_path):
    return JsonMappingTemplateRepository(tmp_path / "templates")


@pytest.fixture
def use_case(repository):
    return WorkbenchUseCase(
        WorkbenchDependencies(
            logger=NullLogger(),
            upload_reader=UploadReader(),
            export_writer=ExportFileWriter(),
            template_repository=repository,
        )
    )


def _request(file_path: Path, output_dir: Path, **kwargs) -> ExportWorkbenchRequest:
    kwargs.setdefault("record_type", RecordType.CUSTOMER)
    kwargs.setdefault("timestamp_ms", 1_700_000_000_000)
    return ExportWorkbenchRequest(file_path=file_path, output_dir=output_dir, **kwargs)


class TestProfile:
    def test_profiles_upload(self, use_case, customer_csv):
        response = use_case.profile(ProfileUploadRequest(file_path=customer_csv))

        assert response.success
        assert [p.name for p in response.profiles] == [
            "Company Name",
            "E-Mail",
            "Phone Number",
            "Notes",
        ]
        assert response.profiles[1].detected_type is DetectedColumnType.EMAIL

    def test_missing_file_is_reported(self, use_case, tmp_path):
        response = use_case.profile(ProfileUploadRequest(file_path=tmp_path / "x.csv"))

        assert not response.success
        assert "File not found" in response.errors[0]


class TestExecute:
    def test_auto_matched_export(self, use_case, customer_csv, tmp_path):
        # Arrange
        output_dir = tmp_path / "out"

        # Act
        response = use_case.execute(_request(customer_csv, output_dir))

        # Assert
        assert response.success, response.errors
        assert response.record_type is RecordType.CUSTOMER
        assert response.auto_matched == 3
        assert response.mapped_count == 3
        expected = output_dir / "netsuite-customer-import-1700000000000.csv"
        assert response.csv_path == expected
        content = response.csv_path.read_bytes().decode("utf-8")
        assert content.startswith("Company Name,Email,Phone\r\n")
        assert '"Globex, Inc.",info@globex.test,555-987-6543' in content
        assert response.workbook_path is not None
        assert load_workbook(response.workbook_path).sheetnames[0] == "Data Profile"

    def test_validation_issues_do_not_fail(self, use_case, customer_csv, tmp_path):
        response = use_case.execute(_request(customer_csv, tmp_path))

        assert response.success
        assert not response.has_validation_errors
        messages = [i.message for i in response.export.issues]
        assert messages == [
            "1 source column(s) not mapped: Notes",
            'Required field "Email" has 1 empty value(s)',
        ]

    def test_missing_required_is_a_validation_error(
        self, use_case, customer_csv, tmp_path
    ):
        overrides = [FieldMapping(source_column="E-Mail", target_field="comments")]

        response = use_case.execute(
            _request(customer_csv, tmp_path, mapping_overrides=overrides)
        )

        assert response.success
        assert response.has_validation_errors
        assert response.export.errors[0].message == (
            'Required field "Email" is not mapped'
        )
        assert response.csv_path.exists()

    def test_overrides_with_transforms(self, use_case, customer_csv, tmp_path):
        overrides = [
            FieldMapping(
                source_column="Company Name",
                target_field="companyname",
                transform="uppercase",
            )
        ]

        response = use_case.execute(
            _request(
                customer_csv,
                tmp_path,
                mapping_overrides=overrides,
                auto_match=False,
                write_workbook=False,
            )
        )

        assert response.csv_path.read_text(encoding="utf-8").splitlines()[1] == (
            "ACME CORP"
        )
        assert response.workbook_path is None
        assert response.auto_matched == 0

    def test_unknown_override_column_warns(self, use_case, customer_csv, tmp_path):
        overrides = [FieldMapping(source_column="Fax", target_field="fax")]

        response = use_case.execute(
            _request(customer_csv, tmp_path, mapping_overrides=overrides)
        )

        assert response.success
        assert response.warnings == [
            "Column 'Fax' is not in the upload; mapping ignored"
        ]

    def test_save_and_reuse_template(
        self, use_case, repository, customer_csv, tmp_path
    ):
        first = use_case.execute(
            _request(
                customer_csv,
                tmp_path,
                record_type=RecordType.CONTACT,
                auto_match=False,
                mapping_overrides=[
                    FieldMapping(source_column="E-Mail", target_field="email"),
                ],
                save_template_as="crm",
                write_workbook=False,
            )
        )
        assert first.template_id is not None

        second = use_case.execute(
            _request(
                customer_csv,
                tmp_path,
                record_type=None,
                template_name="crm",
                auto_match=False,
                write_workbook=False,
            )
        )

        assert second.success, second.errors
        assert second.record_type is RecordType.CONTACT
        assert [m.target_field for m in second.mappings] == ["", "email", "", ""]

    def test_saving_twice_updates_template(
        self, use_case, repository, customer_csv, tmp_path
    ):
        request = _request(
            customer_csv, tmp_path, save_template_as="crm", write_workbook=False
        )

        first = use_case.execute(request)
        second = use_case.execute(request)

        assert first.template_id == second.template_id
        assert len(repository.list_templates("local")) == 1

    def test_unknown_template(self, use_case, customer_csv, tmp_path):
        response = use_case.execute(
            _request(customer_csv, tmp_path, template_name="nope")
        )

        assert not response.success
        assert "Mapping template 'nope' not found" in response.errors[0]
        assert response.csv_path is None

    def test_reader_failure_is_captured(self, tmp_path):
        reader = Mock()
        reader.read.side_effect = RuntimeError("disk on fire")
        use_case = WorkbenchUseCase(
            WorkbenchDependencies(
                logger=NullLogger(),
                upload_reader=reader,
                export_writer=ExportFileWriter(),
            )
        )

        response = use_case.execute(_request(tmp_path / "in.csv", tmp_path))

        assert not response.success
        assert response.errors == ["disk on fire"]
        assert response.export is None

    def test_logger_receives_record_type(self, customer_csv, tmp_path):
        logger = Mock()
        use_case = WorkbenchUseCase(
            WorkbenchDependencies(
                logger=logger,
                upload_reader=UploadReader(),
                export_writer=ExportFileWriter(),
            )
        )

        use_case.execute(
            _request(
                customer_csv,
                tmp_path,
                record_type=RecordType.SALES_ORDER,
                auto_match=False,
                write_workbook=False,
            )
        )

        logger.log_mapping_summary.assert_called_once_with(
            0, 4, record_type="salesOrder", auto_matched=0
        )
