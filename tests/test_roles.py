from __future__ import annotations

from graph.models import Module, Role
from resolve.roles import contains_role, is_library, role_of


def test_role_of_returns_module_role() -> None:
    assert role_of(Module(name="L", role=Role.LIBRARY)) is Role.LIBRARY
    assert role_of(Module(name="A", role=Role.APPLICATION)) is Role.APPLICATION
    assert role_of(Module(name="P")) is None


def test_plain_role_is_absent() -> None:
    assert role_of(Module.model_validate({"name": "P", "role": "plain"})) is None


def test_is_library_only_for_library_role() -> None:
    assert is_library(Module(name="L", role=Role.LIBRARY))
    assert not is_library(Module(name="A", role=Role.APPLICATION))
    assert not is_library(Module(name="P"))


def test_contains_role() -> None:
    plain = Module(name="P")
    app = Module(name="A", role=Role.APPLICATION)

    assert not contains_role([])
    assert not contains_role([plain])
    assert contains_role([plain, app])

