"""
pathkit - slash-delimited path arithmetic

Normalizes, joins, and compares path strings without touching a
filesystem. Implemented in Python 3.10+ using only the standard library.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .path import Path, PathResolver
from .core.schemes import SchemeRegistry, get_scheme_registry, set_scheme_registry
from .exceptions import (
    PathKitError,
    InvalidArgumentError,
    InvalidPathTypeError,
    EmptyPathError,
    NotAbsoluteError,
)

__all__ = [
    'Path',
    'PathResolver',
    'SchemeRegistry',
    'get_scheme_registry',
    'set_scheme_registry',
    'PathKitError',
    'InvalidArgumentError',
    'InvalidPathTypeError',
    'EmptyPathError',
    'NotAbsoluteError',
]
