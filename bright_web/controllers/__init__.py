from __future__ import annotations

from bright_web.controllers.blog import BlogController, BlogModel
from bright_web.controllers.error import ErrorController
from bright_web.controllers.index import IndexController
from bright_web.controllers.site import SiteController
from bright_web.core.model import Model
from bright_web.core.registry import ControllerRegistry
from bright_web.core.view import View


def build_registry() -> ControllerRegistry:
    """The site's controllers, filed the way the controller tree lays them out."""
    registry = ControllerRegistry()
    registry.register("index", IndexController, Model, View)
    registry.register("about", SiteController, Model, View)
    registry.register("blog", BlogController, BlogModel, View, directory=("blog",))
    # Lives in the excluded directory: reachable only through the dispatcher's error path
    registry.register("error", ErrorController, Model, View, directory=("error",))
    return registry


__all__ = [
    "BlogController",
    "ErrorController",
    "IndexController",
    "SiteController",
    "build_registry",
]
