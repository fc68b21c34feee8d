"""Library root scanning."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from utils import get_extension

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator


def _is_library_file(path: Path, extensions: Collection[str]) -> bool:
    """Check if a path is a regular file with one of the given extensions."""
    if not path.is_file():
        return False
    return get_extension(path.name) in extensions


def _walk_files(root: Path) -> Iterator[Path]:
    """Yield every file below root, following directory symlinks.

    Each real directory is entered once, so symlink cycles terminate.
    """
    seen: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        real = os.path.realpath(dirpath)
        if real in seen:
            dirnames[:] = []
            continue
        seen.add(real)
        base = Path(dirpath)
        for name in filenames:
            yield base / name


def find_library_files(
    root: Path,
    extensions: Collection[str],
) -> Iterator[Path]:
    """Find archive and compiled-unit files under a library root.

    Args:
        root: A library root, either a single file or a directory
        extensions: Bare extensions to collect (e.g. "jar", "class");
            matching is exact and case-sensitive

    Yields:
        Path objects for each matching file. A file root yields itself when
        it matches. A directory root is walked recursively and its matches
        are yielded sorted by relative path. Symlinked directories are followed.
        Missing roots yield nothing.
    """
    if not root.exists():
        return

    if not root.is_dir():
        if _is_library_file(root, extensions):
            yield root
        return

    matched_files = [
        path for path in _walk_files(root) if _is_library_file(path, extensions)
    ]

    matched_files.sort(key=lambda p: p.relative_to(root).as_posix())

    yield from matched_files


__all__ = ["find_library_files"]
