"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SCALANEW_*`` prefix
  3. TOML file    — ``scalanew.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:func:`~scalanew.config.discovery.locate_project`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from scalanew.config.discovery import locate_project, read_config
from scalanew.config.models import LookupConfig, ProjectConfig, TemplatesConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``scalanew.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ScalanewSettings(BaseSettings):
    """Unified settings for the scalanew CLI.

    Attributes:
        project_root: Directory the configured source and class directories
            are relative to (parent of ``scalanew.toml``, or CWD).
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SCALANEW_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_lookup: bool = False

    # --- TOML sections ---
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> ScalanewSettings:
        """Construct settings from CLI invocation.

        Discovers ``scalanew.toml`` via walk-up (or explicit *config_path*).
        Without an explicit *project_root*, the root is the config file's
        directory, else the nearest build-file directory, else CWD. CLI flags
        are merged as highest-priority overrides.
        """
        location = locate_project(project_root)
        toml_path = location.config_path
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if config_path and toml_path else location.root

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    @property
    def source_roots(self) -> list[Path]:
        """Configured source directories resolved against the project root."""
        return [self.project_root / d for d in self.project.source_dirs]

    @property
    def is_scala_project(self) -> bool:
        return "scala" in self.project.natures
