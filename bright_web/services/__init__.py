from .key_generator import KeyGenerator
from .logger import Logger

__all__ = [
    "KeyGenerator",
    "Logger",
]
