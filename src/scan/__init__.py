"""Filesystem scanning for library roots."""

from scan.files import find_library_files

__all__ = ["find_library_files"]
