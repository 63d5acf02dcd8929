from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Tuple

from bright_web.domain.errors import ControllerNotFound

CONTROLLER_ROOT = "controllers"

Directory = Tuple[str, ...]


@dataclass(frozen=True)
class ControllerSpec:
    """Constructors for one controller name plus the directory it is filed under."""

    name: str
    controller: Callable
    model: Callable
    view: Callable
    directory: Directory = ()


class ControllerRegistry:
    """
    Name -> ControllerSpec lookup table, filled once at startup.

    Controllers are filed in a directory tree rooted at ``CONTROLLER_ROOT``
    (``directory=("blog",)`` means ``controllers/blog``) so a search can be
    limited to a subtree and skip a reserved directory.
    """

    def __init__(self, root: str = CONTROLLER_ROOT):
        self.root = root
        self._specs: Dict[str, ControllerSpec] = {}

    def register(self, name: str, controller: Callable, model: Callable, view: Callable, directory: Directory = ()) -> ControllerSpec:
        if name in self._specs:
            raise ValueError(f"Controller {name!r} is already registered.")
        spec = ControllerSpec(name=name, controller=controller, model=model, view=view, directory=tuple(directory))
        self._specs[name] = spec
        return spec

    def get(self, name: str) -> ControllerSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise ControllerNotFound(f"No controller registered under {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[ControllerSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    # -----------------------------
    # Directory tree search
    # -----------------------------
    def _names_in(self, directory: Directory) -> list[str]:
        return sorted(s.name for s in self._specs.values() if s.directory == directory)

    def _subdirectories(self, directory: Directory) -> list[Directory]:
        depth = len(directory)
        subs = {
            s.directory[: depth + 1]
            for s in self._specs.values()
            if len(s.directory) > depth and s.directory[:depth] == directory
        }
        return sorted(subs)

    def _to_directory(self, controller_path: str) -> Directory:
        parts = tuple(p for p in controller_path.strip("/").split("/") if p)
        if not parts or parts[0] != self.root:
            raise ValueError(f"Controller path {controller_path!r} is not under {self.root!r}")
        return parts[1:]

    def find(self, name: str, controller_path: str = CONTROLLER_ROOT, exclude_directory: str = "") -> bool:
        """
        Depth-first, case-sensitive search for ``name`` starting at
        ``controller_path``. Subdirectories named ``exclude_directory`` are
        not entered.
        """
        return self._search(self._to_directory(controller_path), name, exclude_directory)

    def _search(self, directory: Directory, name: str, exclude_directory: str) -> bool:
        if name in self._names_in(directory):
            return True
        for sub in self._subdirectories(directory):
            if sub[-1] == exclude_directory:
                continue
            if self._search(sub, name, exclude_directory):
                return True
        return False
