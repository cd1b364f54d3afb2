from .config import Config, Indices, Notation, defaults
from .exceptions import (
    ConfigurationError,
    InvalidPathInputError,
    InvalidSegmentError,
    PathError,
    PathSyntaxError,
)
from .path import Path

__all__ = [
    "Config",
    "ConfigurationError",
    "Indices",
    "InvalidPathInputError",
    "InvalidSegmentError",
    "Notation",
    "Path",
    "PathError",
    "PathSyntaxError",
    "defaults",
]
