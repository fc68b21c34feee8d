"""Load module graph snapshots from TOML files.

Example::

    [[module]]
    name = "App"
    role = "application"
    output_dir = "out/App"

    [[module.dependency]]
    kind = "module"
    name = "LibA"

    [[module.dependency]]
    kind = "library"
    name = "Gson"
    exported = true

    [[library]]
    name = "Gson"
    roots = ["repo/gson-2.8.jar"]

Relative paths are resolved against the directory holding the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from graph.models import GraphError, Library, Module, Toolchain
from graph.snapshot import ModuleGraph

DEFAULT_GRAPH_FILENAME = "modules.toml"


class _GraphFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    module: list[Module] = Field(default_factory=list)
    library: list[Library] = Field(default_factory=list)
    toolchain: list[Toolchain] = Field(default_factory=list)


def _anchor(base: Path, path: Path) -> Path:
    return path if path.is_absolute() else base / path


def _anchor_paths(data: _GraphFile, base: Path) -> _GraphFile:
    modules = [
        module.model_copy(update={"output_dir": _anchor(base, module.output_dir)})
        if module.output_dir is not None
        else module
        for module in data.module
    ]
    libraries = [
        lib.model_copy(update={"roots": [_anchor(base, r) for r in lib.roots]})
        for lib in data.library
    ]
    toolchains = [
        tc.model_copy(update={"roots": [_anchor(base, r) for r in tc.roots]})
        for tc in data.toolchain
    ]
    return _GraphFile(module=modules, library=libraries, toolchain=toolchains)


def parse_graph(data: dict[str, Any], *, base_dir: Path) -> ModuleGraph:
    """Build a graph from already-decoded TOML data."""
    try:
        graph_file = _GraphFile.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph definition: {e}"
        raise GraphError(msg) from e

    graph_file = _anchor_paths(graph_file, base_dir)
    graph = ModuleGraph(graph_file.module, graph_file.library, graph_file.toolchain)

    problems = graph.validate()
    if problems:
        msg = "Dangling graph references: " + "; ".join(problems)
        raise GraphError(msg)
    return graph


def load_graph(path: Path) -> ModuleGraph:
    """Load a graph snapshot from a TOML file."""
    if not path.is_file():
        msg = f"Graph file not found: {path}"
        raise GraphError(msg)

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise GraphError(msg) from e

    try:
        return parse_graph(data, base_dir=path.parent)
    except GraphError as e:
        msg = f"{path}: {e}"
        raise GraphError(msg) from e


__all__ = ["DEFAULT_GRAPH_FILENAME", "load_graph", "parse_graph"]
