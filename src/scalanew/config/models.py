"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, scalanew.toml only contains
overrides. A standard sbt/Maven layout needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProjectConfig(BaseModel):
    """[project] section."""

    model_config = {"frozen": True}

    name: str = "my-project"
    natures: list[str] = Field(default_factory=lambda: ["scala"])
    source_dirs: list[str] = Field(
        default_factory=lambda: ["src/main/scala", "src/test/scala"]
    )
    class_dirs: list[str] = Field(default_factory=lambda: ["target/classes"])
    classpath: list[str] = Field(default_factory=list)


class LookupConfig(BaseModel):
    """[lookup] section — the background symbol index."""

    model_config = {"frozen": True}

    enabled: bool = True
    timeout: float = 2.0
    workers: int = 1
    index_sources: bool = True


class TemplatesConfig(BaseModel):
    """[templates] section."""

    model_config = {"frozen": True}

    default: str = "class"
