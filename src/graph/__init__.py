"""Module graph snapshots."""

from graph.loader import load_graph, parse_graph
from graph.models import (
    Dependency,
    GraphError,
    Library,
    LibraryDependency,
    Module,
    ModuleDependency,
    Role,
    Scope,
    Toolchain,
    ToolchainDependency,
)
from graph.snapshot import GraphView, ModuleGraph

__all__ = [
    "Dependency",
    "GraphError",
    "GraphView",
    "Library",
    "LibraryDependency",
    "Module",
    "ModuleDependency",
    "ModuleGraph",
    "Role",
    "Scope",
    "Toolchain",
    "ToolchainDependency",
    "load_graph",
    "parse_graph",
]
