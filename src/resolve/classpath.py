"""Transitive classpath closure of a module.

For a starting module the resolver collects two things in one depth-first
walk over compile-scope edges:

* library files: every archive or compiled-unit file found under the roots
  of the libraries visible to the module;
* output directories: the compiled output contributed by dependent modules,
  either the raw output directory of a plain module or the packaged-classes
  directory of a library module.

Visibility narrows as the walk descends. Below a plain (or application)
module only exported library edges are followed; below a library module the
current visibility is kept, since its whole closure is packaged with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from graph.models import LibraryDependency, ModuleDependency, Role, Scope
from resolve.roles import is_library, role_of
from scan.files import find_library_files
from settings.config import ClosureConfig

if TYPE_CHECKING:
    from graph.models import Module
    from graph.snapshot import GraphView
    from resolve.roles import RoleLookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClasspathResult:
    libraries: frozenset[Path] = field(default_factory=frozenset)
    output_dirs: frozenset[Path] = field(default_factory=frozenset)

    def as_strings(self) -> dict[str, list[str]]:
        return {
            "libraries": sorted(str(p) for p in self.libraries),
            "output_dirs": sorted(str(p) for p in self.output_dirs),
        }


@dataclass
class _Walk:
    """Per-call traversal state. Never shared between calls."""

    libraries: set[Path] | None
    output_dirs: set[Path] | None
    visited: set[str] = field(default_factory=set)


class ClasspathResolver:
    """Compute classpath closures over a graph snapshot.

    The resolver holds only read-only collaborators; all traversal state
    lives in a per-call ``_Walk``, so one instance may serve concurrent
    callers.
    """

    def __init__(
        self,
        graph: GraphView,
        *,
        config: ClosureConfig | None = None,
        role_lookup: RoleLookup = role_of,
    ) -> None:
        self._graph = graph
        self._config = config if config is not None else ClosureConfig()
        self._role_lookup = role_lookup

    def resolve(
        self,
        start: Module | str,
        *,
        want_libraries: bool = True,
        want_output_dirs: bool = True,
    ) -> ClasspathResult:
        """Resolve the closure of ``start``.

        Raises:
            GraphError: If the graph references an entity it cannot supply.
        """
        module = self._graph.module(start) if isinstance(start, str) else start
        walk = _Walk(
            libraries=set() if want_libraries else None,
            output_dirs=set() if want_output_dirs else None,
        )
        self._visit(module, walk, exported_only=False)
        return ClasspathResult(
            libraries=frozenset(walk.libraries or ()),
            output_dirs=frozenset(walk.output_dirs or ()),
        )

    def _visit(self, module: Module, walk: _Walk, *, exported_only: bool) -> None:
        if module.name in walk.visited:
            return
        walk.visited.add(module.name)
        logger.debug("visiting %s (exported_only=%s)", module.name, exported_only)

        if walk.libraries is not None:
            self._collect_libraries(module, walk.libraries, exported_only)

        for dep in self._graph.dependencies(module, Scope.COMPILE):
            match dep:
                case ModuleDependency(name=name):
                    dep_module = self._graph.module(name)
                    dep_library = is_library(dep_module, self._role_lookup)
                    if walk.output_dirs is not None:
                        self._collect_output_dir(dep_module, walk.output_dirs)
                    self._visit(
                        dep_module,
                        walk,
                        exported_only=not dep_library or exported_only,
                    )

    def _collect_libraries(
        self, module: Module, result: set[Path], exported_only: bool
    ) -> None:
        extensions = self._config.library_extensions
        for dep in self._graph.dependencies(
            module, Scope.COMPILE, exported_only=exported_only
        ):
            match dep:
                case LibraryDependency(name=name):
                    for root in self._graph.library(name).roots:
                        result.update(find_library_files(root, extensions))

    def _collect_output_dir(self, dep_module: Module, result: set[Path]) -> None:
        output_dir = dep_module.output_dir
        if output_dir is None:
            return

        role = self._role_lookup(dep_module)
        if role is Role.LIBRARY:
            packaged = output_dir / self._config.packaged_archive_name
            if packaged.is_dir():
                result.add(packaged)
        elif role is None and output_dir.is_dir():
            result.add(output_dir)
        # application modules contribute nothing: app -> app is unsupported


def resolve_classpath(
    graph: GraphView,
    start: Module | str,
    *,
    want_libraries: bool = True,
    want_output_dirs: bool = True,
    config: ClosureConfig | None = None,
    role_lookup: RoleLookup = role_of,
) -> ClasspathResult:
    """Resolve library files and dependent output directories of ``start``."""
    resolver = ClasspathResolver(graph, config=config, role_lookup=role_lookup)
    return resolver.resolve(
        start,
        want_libraries=want_libraries,
        want_output_dirs=want_output_dirs,
    )


def get_external_libraries(
    graph: GraphView,
    start: Module | str,
    *,
    config: ClosureConfig | None = None,
) -> set[Path]:
    result = resolve_classpath(
        graph, start, want_libraries=True, want_output_dirs=False, config=config
    )
    return set(result.libraries)


def get_classdirs_of_dependent_modules(
    graph: GraphView,
    start: Module | str,
    *,
    config: ClosureConfig | None = None,
) -> set[Path]:
    result = resolve_classpath(
        graph, start, want_libraries=False, want_output_dirs=True, config=config
    )
    return set(result.output_dirs)


__all__ = [
    "ClasspathResolver",
    "ClasspathResult",
    "get_classdirs_of_dependent_modules",
    "get_external_libraries",
    "resolve_classpath",
]
