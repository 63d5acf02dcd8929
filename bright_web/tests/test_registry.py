from __future__ import annotations

import pytest

from bright_web.controllers import build_registry
from bright_web.core.controller import Controller
from bright_web.core.model import Model
from bright_web.core.registry import ControllerRegistry
from bright_web.core.view import View
from bright_web.domain.errors import ControllerNotFound


def make_registry() -> ControllerRegistry:
    registry = ControllerRegistry()
    registry.register("index", Controller, Model, View)
    registry.register("blog", Controller, Model, View, directory=("blog",))
    registry.register("archive", Controller, Model, View, directory=("blog", "old"))
    registry.register("error", Controller, Model, View, directory=("error",))
    return registry


def test_register_rejects_duplicates():
    registry = make_registry()
    with pytest.raises(ValueError):
        registry.register("index", Controller, Model, View)


def test_get_unknown_name_raises_controller_not_found():
    with pytest.raises(ControllerNotFound) as exc:
        make_registry().get("nope")
    assert exc.value.code == 404


def test_container_protocol():
    registry = make_registry()
    assert "blog" in registry
    assert "nope" not in registry
    assert len(registry) == 4
    assert [spec.name for spec in registry] == ["index", "blog", "archive", "error"]


@pytest.mark.parametrize(
    "name, path, exclude, expected",
    [
        ("index", "controllers", "", True),
        ("blog", "controllers", "", True),
        ("archive", "controllers", "", True),  # nested two levels down
        ("error", "controllers", "", True),
        ("error", "controllers", "error", False),
        ("archive", "controllers", "old", False),
        ("blog", "controllers", "old", True),
        ("Blog", "controllers", "", False),
        ("index", "controllers/blog", "", False),
        ("archive", "controllers/blog", "", True),
        ("nope", "controllers", "", False),
    ],
)
def test_find(name, path, exclude, expected):
    assert make_registry().find(name, path, exclude) is expected


def test_find_rejects_paths_outside_the_root():
    with pytest.raises(ValueError):
        make_registry().find("index", "views")


def test_site_registry_files_error_controller_in_its_own_directory():
    registry = build_registry()
    assert registry.get("error").directory == ("error",)
    assert registry.find("blog", "controllers", "error")
    assert not registry.find("error", "controllers", "error")
