"""Module graph models.

A graph snapshot is made of modules, libraries and toolchains. Modules carry
an ordered list of dependency edges, each edge pointing at exactly one of the
three entity kinds.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class GraphError(Exception):
    """Raised when a graph snapshot is malformed or references are dangling."""


class Role(str, Enum):
    """How dependents consume a module's compiled output."""

    LIBRARY = "library"
    APPLICATION = "application"


class Scope(str, Enum):
    """Classpath scope a dependency edge belongs to."""

    COMPILE = "compile"
    RUNTIME = "runtime"


class _Frozen(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class _DependencyBase(_Frozen):
    name: str = Field(description="Name of the referenced entity")
    exported: bool = Field(
        default=False,
        description="Visible to modules depending on the owner transitively",
    )
    scope: Scope = Field(default=Scope.COMPILE)


class ModuleDependency(_DependencyBase):
    """Edge to another module."""

    kind: Literal["module"] = "module"


class LibraryDependency(_DependencyBase):
    """Edge to an external library."""

    kind: Literal["library"] = "library"


class ToolchainDependency(_DependencyBase):
    """Edge to an SDK-like toolchain."""

    kind: Literal["toolchain"] = "toolchain"


Dependency = Annotated[
    Union[ModuleDependency, LibraryDependency, ToolchainDependency],
    Field(discriminator="kind"),
]


class Library(_Frozen):
    """A named external dependency with ordered root paths on disk."""

    name: str
    roots: list[Path] = Field(default_factory=list)


class Toolchain(_Frozen):
    """A language or platform SDK referenced by modules."""

    name: str
    roots: list[Path] = Field(default_factory=list)


class Module(_Frozen):
    """A buildable unit of the graph."""

    name: str
    role: Role | None = Field(
        default=None,
        description="Absent for plain modules",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Compiled output directory, absent if nothing is produced",
    )
    dependencies: list[Dependency] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dependency", "dependencies"),
    )

    @field_validator("role", mode="before")
    @classmethod
    def plain_means_no_role(cls, v: object) -> object:
        if v == "plain":
            return None
        return v


__all__ = [
    "Dependency",
    "GraphError",
    "Library",
    "LibraryDependency",
    "Module",
    "ModuleDependency",
    "Role",
    "Scope",
    "Toolchain",
    "ToolchainDependency",
]
