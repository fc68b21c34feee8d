"""In-memory module graph snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from graph.models import (
    GraphError,
    Library,
    LibraryDependency,
    Module,
    ModuleDependency,
    Scope,
    Toolchain,
    ToolchainDependency,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from graph.models import Dependency


class GraphView(Protocol):
    """Read-only view of a module graph consumed by the resolver."""

    def module(self, name: str) -> Module: ...

    def library(self, name: str) -> Library: ...

    def toolchain(self, name: str) -> Toolchain: ...

    def dependencies(
        self, module: Module, scope: Scope, *, exported_only: bool = False
    ) -> list[Dependency]: ...


def _index(items: Iterable[Module | Library | Toolchain], kind: str) -> dict:
    indexed: dict[str, Module | Library | Toolchain] = {}
    for item in items:
        if item.name in indexed:
            msg = f"Duplicate {kind} name: {item.name!r}"
            raise GraphError(msg)
        indexed[item.name] = item
    return indexed


class ModuleGraph:
    """Name-indexed snapshot of modules, libraries and toolchains.

    The snapshot is never mutated after construction, so any number of
    resolutions may read it at the same time.
    """

    def __init__(
        self,
        modules: Iterable[Module] = (),
        libraries: Iterable[Library] = (),
        toolchains: Iterable[Toolchain] = (),
    ) -> None:
        self._modules: dict[str, Module] = _index(modules, "module")
        self._libraries: dict[str, Library] = _index(libraries, "library")
        self._toolchains: dict[str, Toolchain] = _index(toolchains, "toolchain")

    @property
    def modules(self) -> list[Module]:
        return list(self._modules.values())

    def module(self, name: str) -> Module:
        try:
            return self._modules[name]
        except KeyError as exc:
            msg = f"Unknown module: {name!r}"
            raise GraphError(msg) from exc

    def library(self, name: str) -> Library:
        try:
            return self._libraries[name]
        except KeyError as exc:
            msg = f"Unknown library: {name!r}"
            raise GraphError(msg) from exc

    def toolchain(self, name: str) -> Toolchain:
        try:
            return self._toolchains[name]
        except KeyError as exc:
            msg = f"Unknown toolchain: {name!r}"
            raise GraphError(msg) from exc

    def dependencies(
        self, module: Module, scope: Scope, *, exported_only: bool = False
    ) -> list[Dependency]:
        """Return the module's edges of one scope in declaration order."""
        return [
            dep
            for dep in module.dependencies
            if dep.scope == scope and (dep.exported or not exported_only)
        ]

    def validate(self) -> list[str]:
        """Return a message for every dependency pointing at a missing entity."""
        problems: list[str] = []
        for module in self._modules.values():
            for dep in module.dependencies:
                match dep:
                    case ModuleDependency(name=name) if name not in self._modules:
                        problems.append(
                            f"module {module.name!r} depends on unknown module {name!r}"
                        )
                    case LibraryDependency(name=name) if name not in self._libraries:
                        problems.append(
                            f"module {module.name!r} depends on unknown library {name!r}"
                        )
                    case ToolchainDependency(name=name) if (
                        name not in self._toolchains
                    ):
                        problems.append(
                            f"module {module.name!r} depends on unknown toolchain {name!r}"
                        )
        return problems


__all__ = ["GraphView", "ModuleGraph"]
