from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults
from .domain.entities.record_type import RecordType


@dataclass(frozen=True, slots=True)
class WorkbenchConfig:
    template_dir: Path = field(default_factory=lambda: Path(Defaults.TEMPLATE_DIR))
    output_dir: Path = field(default_factory=lambda: Path(Defaults.OUTPUT_DIR))
    default_record_type: str = Defaults.RECORD_TYPE
    default_user: str = Defaults.USER_ID
    auto_match: bool = Defaults.AUTO_MATCH
    write_workbook: bool = Defaults.WRITE_WORKBOOK
    csv_encoding: str = Defaults.CSV_ENCODING

    def __post_init__(self) -> None:
        if self.default_record_type not in {rt.value for rt in RecordType}:
            raise ValueError(
                "default_record_type must be one of "
                f"{[rt.value for rt in RecordType]}, "
                f"got {self.default_record_type!r}"
            )
        if not self.default_user.strip():
            raise ValueError("default_user must not be blank")
        if not self.csv_encoding.strip():
            raise ValueError("csv_encoding must not be blank")

    @property
    def record_type(self) -> RecordType:
        return RecordType(self.default_record_type)

    @classmethod
    def from_env(cls) -> WorkbenchConfig:
        return cls(
            template_dir=Path(
                os.getenv("WORKBENCH_TEMPLATE_DIR", Defaults.TEMPLATE_DIR)
            ),
            output_dir=Path(os.getenv("WORKBENCH_OUTPUT_DIR", Defaults.OUTPUT_DIR)),
            default_record_type=os.getenv(
                "WORKBENCH_RECORD_TYPE", Defaults.RECORD_TYPE
            ).strip(),
            default_user=os.getenv("WORKBENCH_USER", Defaults.USER_ID).strip()
            or Defaults.USER_ID,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WorkbenchConfig:
        config = WorkbenchConfig.from_env()
        if config_file is None:
            config_file = Path("netsuite_workbench.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: WorkbenchConfig
    ) -> WorkbenchConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        paths = _get_table(data, "paths")
        default_section = _get_table(data, "default")
        template_dir = base_config.template_dir
        if value := paths.get("template_dir"):
            template_dir = Path(str(value))
        output_dir = base_config.output_dir
        if value := paths.get("output_dir"):
            output_dir = Path(str(value))
        default_record_type = base_config.default_record_type
        if (value := default_section.get("record_type")) is not None:
            default_record_type = str(value).strip()
        default_user = base_config.default_user
        if (value := default_section.get("user")) is not None:
            default_user = str(value).strip()
        auto_match = base_config.auto_match
        if (value := default_section.get("auto_match")) is not None:
            auto_match = _coerce_bool(value, key="default.auto_match")
        write_workbook = base_config.write_workbook
        if (value := default_section.get("write_workbook")) is not None:
            write_workbook = _coerce_bool(value, key="default.write_workbook")
        csv_encoding = base_config.csv_encoding
        if (value := default_section.get("csv_encoding")) is not None:
            csv_encoding = str(value)
        return WorkbenchConfig(
            template_dir=template_dir,
            output_dir=output_dir,
            default_record_type=default_record_type,
            default_user=default_user,
            auto_match=auto_match,
            write_workbook=write_workbook,
            csv_encoding=csv_encoding,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")
