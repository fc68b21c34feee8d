"""Shared path utilities for classpath-closure."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableSet


def get_extension(file_name: str) -> str:
    """Return the extension of a file name without the leading dot.

    Only the text after the last dot counts, and matching is left to the
    caller (no case folding).

    Examples:
        >>> get_extension("guava-30.jar")
        'jar'
        >>> get_extension("Foo.CLASS")
        'CLASS'
        >>> get_extension("README")
        ''
        >>> get_extension(".jar")
        'jar'
    """
    _, dot, ext = file_name.rpartition(".")
    return ext if dot else ""


def to_paths(files: Iterable[str | Path]) -> list[str]:
    """Convert paths to their string form, keeping order."""
    return [str(Path(f)) for f in files]


def add_subdirectories(base_dir: Path, result: MutableSet[str]) -> None:
    """Add the immediate child directories of base_dir to result.

    A missing or non-directory base_dir adds nothing.
    """
    if not base_dir.is_dir():
        return

    for child in base_dir.iterdir():
        if child.is_dir():
            result.add(str(child))


__all__ = ["add_subdirectories", "get_extension", "to_paths"]
