"""
pathkit Exception Hierarchy

Architecture:
    PathKitError (Base)
    ├── InvalidArgumentError
    │   ├── InvalidPathTypeError
    │   ├── EmptyPathError
    │   ├── NotAbsoluteError
    │   └── InvalidSchemeError
    └── ConfigValidationError
"""

from .path_exceptions import (
    PathKitError,
    InvalidArgumentError,
    InvalidPathTypeError,
    EmptyPathError,
    NotAbsoluteError,
    InvalidSchemeError,
    ConfigValidationError,
)

__all__ = [
    'PathKitError',
    'InvalidArgumentError',
    'InvalidPathTypeError',
    'EmptyPathError',
    'NotAbsoluteError',
    'InvalidSchemeError',
    'ConfigValidationError',
]
