"""
pathkit Path Module

Purely syntactic path arithmetic:
- Segment splitting and joining
- Normalization of . and ..
- Resolution and absolute paths
- Relative paths and containment tests
- Directory, filename and extension accessors
"""

from .path import Path
from .path_resolver import PathResolver

__all__ = [
    'Path',
    'PathResolver',
]
