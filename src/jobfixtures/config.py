"""Configuration models, loading logic and key/value lookup adapters."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, ClassVar, Final, Literal, Mapping, Protocol

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_SETTINGS_FILE = Path("configs/settings.yaml")
SETTINGS_FILE_ENV = "JOBFIXTURES_SETTINGS_FILE"

SCRATCH_DIR_KEY: Final = "scratch.tmp_dir"
DEFAULT_SCRATCH_DIR: Final = "/tmp"


class ConfigurationProvider(Protocol):
    """Key/value lookup with a caller-supplied default."""

    def get_string(self, key: str, default: str) -> str: ...


class ProjectConfig(BaseModel):
    """Project metadata settings."""

    name: str = "jobfixtures"
    env: str = "dev"


class ScratchConfig(BaseModel):
    """Scratch directory for generated fixtures."""

    tmp_dir: Path | None = None


class LoggingConfig(BaseModel):
    """Log level and destinations for CLI runs."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    file_name: str = "jobfixtures.log"
    console: bool = True


class PathsConfig(BaseModel):
    """Filesystem paths owned by the tooling itself."""

    logs_root: Path = Path("./logs")

    def resolved(self, project_root: Path) -> "PathsConfig":
        """Return a copy with project-relative paths resolved to absolute paths."""

        updates: dict[str, Path] = {}
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            updates[field_name] = value if value.is_absolute() else (project_root / value).resolve()
        return self.model_copy(update=updates)


class AppSettings(BaseSettings):
    """Top-level application settings."""

    _yaml_file_override: ClassVar[Path | None] = None

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    scratch: ScratchConfig = Field(default_factory=ScratchConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="JOBFIXTURES_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use YAML defaults while allowing env vars to override values."""

        yaml_file = resolve_settings_file(cls._yaml_file_override)
        yaml_settings = YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    def as_dict(self) -> dict[str, object]:
        """Return settings as a standard nested dictionary."""

        return self.model_dump(mode="json")


def find_project_root(start: Path | None = None) -> Path:
    """Locate the project root by traversing upward for config markers."""

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / "configs/settings.yaml").exists():
            return candidate
    return current


def resolve_settings_file(override: Path | None = None) -> Path:
    """Resolve settings file from explicit override, env var, or default."""

    chosen = override
    if chosen is None:
        env_value = os.getenv(SETTINGS_FILE_ENV)
        if env_value:
            chosen = Path(env_value)
    if chosen is None:
        chosen = DEFAULT_SETTINGS_FILE

    if not chosen.is_absolute():
        chosen = (find_project_root() / chosen).resolve()
    return chosen


def load_settings(config_file: Path | None = None) -> AppSettings:
    """Load settings with YAML defaults and environment variable overrides."""

    settings_file = resolve_settings_file(config_file)
    project_root = settings_file.parent.parent.resolve()
    AppSettings._yaml_file_override = settings_file
    try:
        settings = AppSettings()
    finally:
        AppSettings._yaml_file_override = None
    resolved_paths = settings.paths.resolved(project_root=project_root)
    return settings.model_copy(update={"paths": resolved_paths})


class MappingConfiguration:
    """Configuration backed by an explicit mapping of keys to values."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get_string(self, key: str, default: str) -> str:
        value = self._values.get(key)
        return default if value is None else str(value)


class SettingsConfiguration:
    """Resolve dotted keys such as ``scratch.tmp_dir`` against loaded settings."""

    def __init__(self, settings: AppSettings) -> None:
        self._settings = settings

    def get_string(self, key: str, default: str) -> str:
        node: Any = self._settings.as_dict()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        if node is None or isinstance(node, (dict, list)):
            return default
        return str(node)
