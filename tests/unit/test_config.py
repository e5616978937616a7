"""Unit tests for configuration and constants."""

from __future__ import annotations

from pathlib import Path

import pytest

from netsuite_workbench.config import ConfigLoader, WorkbenchConfig
from netsuite_workbench.constants import Defaults, Thresholds
from netsuite_workbench.domain.entities.record_type import RecordType


class TestWorkbenchConfig:
    """Test suite for WorkbenchConfig class."""

    def test_default_config(self):
        config = WorkbenchConfig()

        assert config.template_dir == Path(".workbench/templates")
        assert config.output_dir == Path("output")
        assert config.default_record_type == "customer"
        assert config.record_type is RecordType.CUSTOMER
        assert config.default_user == "local"
        assert config.auto_match is True
        assert config.write_workbook is True
        assert config.csv_encoding == "utf-8"

    def test_config_is_immutable(self):
        config = WorkbenchConfig()

        with pytest.raises(Exception):  # FrozenInstanceError
            config.default_user = "someone"

    def test_invalid_record_type(self):
        with pytest.raises(ValueError, match="default_record_type must be one of"):
            WorkbenchConfig(default_record_type="lead")

    def test_blank_user(self):
        with pytest.raises(ValueError, match="default_user must not be blank"):
            WorkbenchConfig(default_user="  ")

    def test_blank_encoding(self):
        with pytest.raises(ValueError, match="csv_encoding must not be blank"):
            WorkbenchConfig(csv_encoding="")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("WORKBENCH_TEMPLATE_DIR", "/tmp/templates")
        monkeypatch.setenv("WORKBENCH_OUTPUT_DIR", "/tmp/out")
        monkeypatch.setenv("WORKBENCH_RECORD_TYPE", "salesOrder")
        monkeypatch.setenv("WORKBENCH_USER", "alice")

        config = WorkbenchConfig.from_env()

        assert config.template_dir == Path("/tmp/templates")
        assert config.output_dir == Path("/tmp/out")
        assert config.record_type is RecordType.SALES_ORDER
        assert config.default_user == "alice"

    def test_from_env_defaults(self):
        config = WorkbenchConfig.from_env()

        assert config == WorkbenchConfig()


class TestConfigLoader:
    def test_missing_file_uses_env_defaults(self, tmp_path):
        config = ConfigLoader.load(tmp_path / "missing.toml")

        assert config == WorkbenchConfig()

    def test_loads_toml(self, tmp_path):
        config_file = tmp_path / "netsuite_workbench.toml"
        config_file.write_text(
            "[paths]\n"
            'template_dir = "tpl"\n'
            'output_dir = "exports"\n'
            "\n"
            "[default]\n"
            'record_type = "vendor"\n'
            'user = "bob"\n'
            "auto_match = false\n"
            "write_workbook = false\n"
            'csv_encoding = "utf-8-sig"\n',
            encoding="utf-8",
        )

        config = ConfigLoader.load(config_file)

        assert config.template_dir == Path("tpl")
        assert config.output_dir == Path("exports")
        assert config.record_type is RecordType.VENDOR
        assert config.default_user == "bob"
        assert config.auto_match is False
        assert config.write_workbook is False
        assert config.csv_encoding == "utf-8-sig"

    def test_broken_file_warns_and_falls_back(self, tmp_path):
        config_file = tmp_path / "netsuite_workbench.toml"
        config_file.write_text("[default\nrecord_type = ", encoding="utf-8")

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file)

        assert config == WorkbenchConfig()

    def test_invalid_value_warns(self, tmp_path):
        config_file = tmp_path / "netsuite_workbench.toml"
        config_file.write_text('[default]\nrecord_type = "lead"\n', encoding="utf-8")

        with pytest.warns(UserWarning):
            config = ConfigLoader.load(config_file)

        assert config.record_type is RecordType.CUSTOMER

    def test_default_file_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "netsuite_workbench.toml").write_text(
            '[default]\nuser = "carol"\n', encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert ConfigLoader.load().default_user == "carol"


class TestConstants:
    def test_defaults_match_config(self):
        config = WorkbenchConfig()

        assert Defaults.RECORD_TYPE == config.default_record_type
        assert Defaults.USER_ID == config.default_user

    def test_thresholds(self):
        assert Thresholds.TYPE_MAJORITY == 0.8
        assert Thresholds.TYPE_MIXED == 0.3
        assert Thresholds.TOP_VALUES_LIMIT == 5
        assert Thresholds.UNMAPPED_PREVIEW_LIMIT == 3
