"""
Path Resolver Module

String-in, string-out helpers over ``Path`` for callers that don't want
to hold path values.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Tuple, Union, Any

from pathkit.logger import get_logger, log_function_call
from .path import Path

_logger = get_logger('resolver')

PathLike = Union[str, Path, Any]


class PathResolver:
    """
    Resolves and manipulates slash-delimited paths given as strings.

    Handles:
    - Absolute, relative and scheme-prefixed paths
    - . and .. components
    - Relative paths between two locations
    - Containment tests
    """

    @staticmethod
    def parse(path: PathLike) -> Path:
        """
        Parse a path into a Path value.

        Raises:
            InvalidPathTypeError: If ``path`` is not a string-like value
        """
        return Path.coerce(path)

    @staticmethod
    def normalize(path: PathLike) -> str:
        """
        Normalize a path by resolving . and ..

        Args:
            path: Path to normalize

        Returns:
            Normalized path string
        """
        return Path.coerce(path).normalize().get()

    @staticmethod
    def join(*paths: Optional[PathLike]) -> str:
        """
        Join paths from left to right.

        ``None`` entries are skipped and an absolute path discards
        everything before it. The result is not normalized.

        Args:
            *paths: Paths to join

        Returns:
            Joined path string
        """
        result = Path()
        for path in paths:
            if path is None:
                continue
            result = result.resolve(path)
        return result.get()

    @staticmethod
    def resolve(path: PathLike, cwd: PathLike = '/') -> str:
        """
        Resolve a path against a working directory.

        Args:
            path: Path to resolve
            cwd: Absolute working directory

        Returns:
            Absolute normalized path

        Raises:
            NotAbsoluteError: If ``path`` is relative and ``cwd`` is not absolute
        """
        return Path.coerce(path).abs(cwd).normalize().get()

    @staticmethod
    @log_function_call(_logger)
    def relative(
        path: PathLike,
        directory: PathLike,
        cwd: Optional[PathLike] = None
    ) -> str:
        """
        Get the path of ``path`` relative to ``directory``.

        Args:
            path: Target path; directories must end with '/'
            directory: Directory to start from
            cwd: Working directory for relative arguments

        Returns:
            Relative path string
        """
        return Path.coerce(path).relative_to(directory, cwd).get()

    @staticmethod
    @log_function_call(_logger)
    def is_in(
        path: PathLike,
        directory: PathLike,
        cwd: Optional[PathLike] = None
    ) -> bool:
        """Check whether ``path`` lies within ``directory``."""
        return Path.coerce(path).is_in(directory, cwd)

    @staticmethod
    def dirname(path: PathLike) -> str:
        """
        Get the directory name of a path.

        Args:
            path: Path string

        Returns:
            Directory name portion, ending in '/' unless empty
        """
        return Path.coerce(path).dirname()

    @staticmethod
    def filename(path: PathLike) -> str:
        """Get the filename portion of a path."""
        return Path.coerce(path).filename()

    @staticmethod
    def basename(path: PathLike) -> str:
        """Get the filename without its extension."""
        return Path.coerce(path).basename()

    @staticmethod
    def extension(path: PathLike) -> str:
        """Get the extension of the filename, without the dot."""
        return Path.coerce(path).extension()

    @staticmethod
    def split(path: PathLike) -> Tuple[str, str]:
        """
        Split a path into directory name and filename.

        Args:
            path: Path string

        Returns:
            Tuple of (dirname, filename)
        """
        p = Path.coerce(path)
        return (p.dirname(), p.filename())

    @staticmethod
    def splitext(path: PathLike) -> Tuple[str, str]:
        """
        Split a path into root and extension.

        The extension is returned without the dot; paths without an
        extension give ``(path, '')``.

        Args:
            path: Path string

        Returns:
            Tuple of (root, extension)
        """
        p = Path.coerce(path)
        extension = p.extension()
        if '.' not in p.filename():
            return (p.get(), '')
        return (p.get()[:-(len(extension) + 1)], extension)

    @staticmethod
    def is_absolute(path: PathLike) -> bool:
        """Check if a path is absolute."""
        return Path.coerce(path).is_absolute()

    @staticmethod
    def is_empty(path: PathLike) -> bool:
        """Check if a path is empty."""
        return Path.coerce(path).is_empty()

    @staticmethod
    def parent(path: PathLike) -> str:
        """Get the parent directory path, not normalized."""
        return Path.coerce(path).parent().get()

    @staticmethod
    def equals(a: PathLike, b: PathLike) -> bool:
        """Check if two paths are equal after normalization."""
        return Path.coerce(a).equals(b)

    @staticmethod
    def get_depth(path: PathLike) -> int:
        """
        Get the depth of a path (number of non-empty segments).

        Args:
            path: Path string

        Returns:
            Number of non-empty segments of the normalized path
        """
        normalized = Path.coerce(path).normalize()
        return len([s for s in normalized.segments if s])
