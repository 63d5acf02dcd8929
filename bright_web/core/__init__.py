from .application import Application
from .controller import Controller
from .factory import ApplicationFactory
from .model import Model
from .registry import ControllerRegistry, ControllerSpec
from .view import View

__all__ = [
    "Application",
    "ApplicationFactory",
    "Controller",
    "ControllerRegistry",
    "ControllerSpec",
    "Model",
    "View",
]
