from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults


@dataclass(frozen=True, slots=True)
class RepositoryConfig:
    base_url: str = ""
    metadata_prefix: str = Defaults.METADATA_PREFIX
    value_delimiter: str = Defaults.VALUE_DELIMITER
    id_column: str = Defaults.ID_COLUMN
    files_column: str = Defaults.FILES_COLUMN
    files_base_url: str | None = field(default=None)

    def __post_init__(self) -> None:
        if not self.metadata_prefix.strip():
            raise ValueError("metadata_prefix must not be empty")
        if not self.value_delimiter:
            raise ValueError("value_delimiter must not be empty")
        if not self.id_column.strip():
            raise ValueError("id_column must not be empty")
        if not self.files_column.strip():
            raise ValueError("files_column must not be empty")

    @property
    def resolved_files_base_url(self) -> str:
        return self.files_base_url if self.files_base_url is not None else self.base_url

    @classmethod
    def from_env(cls) -> RepositoryConfig:
        raw_files_base = os.getenv("OAIPMH_FILES_BASE_URL")
        files_base_url = raw_files_base.strip() if raw_files_base else None
        return cls(
            base_url=os.getenv("OAIPMH_BASE_URL", "").strip(),
            metadata_prefix=os.getenv(
                "OAIPMH_METADATA_PREFIX", Defaults.METADATA_PREFIX
            ),
            value_delimiter=os.getenv(
                "OAIPMH_VALUE_DELIMITER", Defaults.VALUE_DELIMITER
            ),
            files_base_url=files_base_url,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> RepositoryConfig:
        config = RepositoryConfig.from_env()
        if config_file is None:
            config_file = Path("oaipmh_repository.toml")
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
        config_file: Path, base_config: RepositoryConfig
    ) -> RepositoryConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        repository = _get_table(data, "repository")
        csv_section = _get_table(data, "csv")
        base_url = base_config.base_url
        if (value := repository.get("base_url")) is not None:
            base_url = _coerce_str(value, key="repository.base_url").strip()
        metadata_prefix = base_config.metadata_prefix
        if (value := repository.get("metadata_prefix")) is not None:
            metadata_prefix = _coerce_str(value, key="repository.metadata_prefix")
        files_base_url = base_config.files_base_url
        if "files_base_url" in repository:
            raw = repository.get("files_base_url")
            cleaned = str(raw).strip() if raw is not None else ""
            files_base_url = cleaned or None
        value_delimiter = base_config.value_delimiter
        if (value := csv_section.get("value_delimiter")) is not None:
            value_delimiter = _coerce_str(value, key="csv.value_delimiter")
        id_column = base_config.id_column
        if (value := csv_section.get("id_column")) is not None:
            id_column = _coerce_str(value, key="csv.id_column")
        files_column = base_config.files_column
        if (value := csv_section.get("files_column")) is not None:
            files_column = _coerce_str(value, key="csv.files_column")
        return RepositoryConfig(
            base_url=base_url,
            metadata_prefix=metadata_prefix,
            value_delimiter=value_delimiter,
            id_column=id_column,
            files_column=files_column,
            files_base_url=files_base_url,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_str(value: object, *, key: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{key} must be a string, got {type(value).__name__}")
