"""Role lookup for modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graph.models import Role

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from graph.models import Module

    RoleLookup = Callable[[Module], Role | None]


def role_of(module: Module) -> Role | None:
    """Return the module's role, or None for a plain module."""
    return module.role


def is_library(module: Module, role_lookup: RoleLookup = role_of) -> bool:
    return role_lookup(module) is Role.LIBRARY


def contains_role(modules: Iterable[Module], role_lookup: RoleLookup = role_of) -> bool:
    """Return True when any module of a build chunk carries a role."""
    return any(role_lookup(module) is not None for module in modules)


__all__ = ["contains_role", "is_library", "role_of"]
