"""Classpath closure resolution."""

from resolve.classpath import (
    ClasspathResolver,
    ClasspathResult,
    get_classdirs_of_dependent_modules,
    get_external_libraries,
    resolve_classpath,
)
from resolve.roles import contains_role, is_library, role_of

__all__ = [
    "ClasspathResolver",
    "ClasspathResult",
    "contains_role",
    "get_classdirs_of_dependent_modules",
    "get_external_libraries",
    "is_library",
    "resolve_classpath",
    "role_of",
]
