from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from graph.loader import DEFAULT_GRAPH_FILENAME

CONFIG_FILENAME = "closure.toml"

DEFAULT_PACKAGED_ARCHIVE_NAME = "classes.jar"

DEFAULT_LIBRARY_EXTENSIONS = ("jar", "class")


class ClosureConfig(BaseModel):
    """Configuration for classpath closure resolution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    graph: str = Field(
        default=DEFAULT_GRAPH_FILENAME,
        description="Graph snapshot file, relative to the project root",
    )
    packaged_archive_name: str = Field(
        default=DEFAULT_PACKAGED_ARCHIVE_NAME,
        description=(
            "Subdirectory of a library module's output dir holding its "
            "packaged classes"
        ),
    )
    library_extensions: tuple[str, ...] = Field(
        default=DEFAULT_LIBRARY_EXTENSIONS,
        description="File extensions collected from library roots (exact match)",
    )

    @field_validator("packaged_archive_name")
    @classmethod
    def validate_packaged_archive_name(cls, v: str) -> str:
        if not v or v in {".", ".."} or "/" in v or "\\" in v:
            msg = f"packaged_archive_name must be a single path component, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("library_extensions", mode="before")
    @classmethod
    def validate_library_extensions(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple)):
            msg = "library_extensions must be a list of strings"
            raise ValueError(msg)
        for ext in v:
            if not isinstance(ext, str) or not ext or ext.startswith("."):
                msg = (
                    f"Invalid library extension {ext!r}: "
                    "use a bare extension such as 'jar'"
                )
                raise ValueError(msg)
        return tuple(v)


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_graph_path(root: Path, config: ClosureConfig) -> Path:
    """Return the graph file path for a project root."""
    graph_path = Path(config.graph).expanduser()
    if graph_path.is_absolute():
        return graph_path
    return (root / graph_path).resolve()


def load_config(root: Path) -> ClosureConfig:
    """Load configuration from closure.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return ClosureConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ClosureConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
