"""
Path Value Module

Immutable slash-delimited path values and the operations on them:
normalization, resolution, relative paths and containment tests.
Nothing here touches a real filesystem.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pathkit.core.schemes import SchemeRegistry, get_scheme_registry
from pathkit.exceptions import (
    EmptyPathError,
    InvalidArgumentError,
    InvalidPathTypeError,
    NotAbsoluteError,
)
from pathkit.logger import get_logger
from . import segments as seg


_logger = get_logger('path')

_NOT_STRINGABLE = (bytes, bytearray, memoryview, int, float, complex)


def _as_string(value: Any) -> str:
    """Convert a path-like argument to its string form."""
    if isinstance(value, str):
        return value
    if isinstance(value, Path):
        return value.get()
    if (
        value is not None
        and not isinstance(value, _NOT_STRINGABLE)
        and type(value).__str__ is not object.__str__
    ):
        return str(value)
    raise InvalidPathTypeError(value)


def _reject(error: InvalidArgumentError) -> InvalidArgumentError:
    _logger.debug(f"Rejected argument: {error.message}", context=error.context)
    return error


class Path:
    """
    A slash-delimited path.

    The path is stored as the tuple of strings obtained by splitting it on
    '/'. A leading empty segment makes it absolute, a trailing one makes it
    a directory. Paths that start with ``name://`` are also absolute when
    ``name`` is in the path's scheme registry.

    Every operation returns a new Path; instances cannot be modified.

    Example:
        >>> Path('/var/wwwroot/js/script.js').relative_to('/var/wwwroot/')
        Path('js/script.js')
    """

    __slots__ = ('_segments', '_count', '_first', '_last', '_schemes')

    def __init__(
        self,
        path: Union[str, Path, Any] = '',
        schemes: Optional[SchemeRegistry] = None
    ) -> None:
        if schemes is None and isinstance(path, Path):
            schemes = path._schemes
        self._assign(seg.split(_as_string(path)), schemes)

    def _assign(self, segments: seg.Segments, schemes: Optional[SchemeRegistry]) -> None:
        object.__setattr__(self, '_segments', segments)
        object.__setattr__(self, '_count', len(segments))
        object.__setattr__(self, '_first', segments[0] if segments else None)
        object.__setattr__(self, '_last', segments[-1] if segments else None)
        object.__setattr__(self, '_schemes', schemes)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def coerce(
        cls,
        value: Union[str, Path, Any],
        schemes: Optional[SchemeRegistry] = None
    ) -> Path:
        """
        Turn a path argument into a Path.

        Paths are returned as they are. Strings and objects with their own
        ``__str__`` are parsed.

        Raises:
            InvalidPathTypeError: For anything else
        """
        if isinstance(value, Path):
            return value
        return cls(value, schemes)

    def _derive(self, segments: seg.Segments) -> Path:
        """Build a new Path sharing this path's scheme registry."""
        path = object.__new__(type(self))
        path._assign(tuple(segments), self._schemes)
        return path

    def _coerce(self, value: Union[str, Path, Any]) -> Path:
        return Path.coerce(value, self._schemes)

    # Segment model

    @property
    def segments(self) -> seg.Segments:
        """The path's segments, left to right."""
        return self._segments

    @property
    def count(self) -> int:
        """Number of segments."""
        return self._count

    @property
    def first_segment(self) -> Optional[str]:
        return self._first

    @property
    def last_segment(self) -> Optional[str]:
        return self._last

    @property
    def schemes(self) -> SchemeRegistry:
        """The scheme registry used for ``is_stream_wrapped``."""
        if self._schemes is None:
            return get_scheme_registry()
        return self._schemes

    def get(self) -> str:
        """Return the path as a string, same as ``str(path)``."""
        return seg.join(self._segments)

    def __str__(self) -> str:
        return self.get()

    def __repr__(self) -> str:
        return f"Path({self.get()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self.get() == other.get()
        if isinstance(other, str):
            return self.get() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.get())

    def __truediv__(self, other: Union[str, Path, Any]) -> Path:
        return self.resolve(other)

    def is_stream_wrapped(self) -> bool:
        """
        Does the path start with a registered ``scheme://`` prefix?

        'php://' and 'php://memory' are stream wrapped if 'php' is a known
        scheme; 'php:/x', ':://' and 'unknown://' are not.
        """
        if self._count < 2:
            return False
        first = self._first
        if first == '' or not first.endswith(':') or self._segments[1] != '':
            return False
        return self.schemes.is_known_scheme(first[:-1])

    def is_empty(self) -> bool:
        """
        Is the path empty?

        Besides '' this is also true for a bare scheme prefix like 'php://'.
        """
        if self._count == 0:
            return True
        if self._count == 1 and self._first == '':
            return True
        return self._count == 3 and self._last == '' and self.is_stream_wrapped()

    def is_absolute(self) -> bool:
        """Does the path start with a '/' or a registered scheme prefix?"""
        return self._first == '' or self.is_stream_wrapped()

    def is_directory(self) -> bool:
        """Does the path end with a '/'?"""
        return self._last == ''

    def assume_directory(self) -> Path:
        """Return the path with a trailing '/' added if it has none."""
        return self._derive(seg.assume_directory(self._segments))

    # Normalizer

    def normalize(self) -> Path:
        """
        Resolve '..' and drop '.' where possible.

        Parent references that would climb above the start of the path
        are kept: '/../' stays '/../'.
        """
        return self._derive(seg.normalize(self._segments))

    def equals(self, other: Union[str, Path, Any]) -> bool:
        """Returns true if both paths are equal after normalization."""
        return self._coerce(other).normalize().get() == self.normalize().get()

    # Resolver

    def resolve(self, addition: Union[str, Path, Any]) -> Path:
        """
        Append a path to this one.

        Example: resolving 'foo/bar' from '/dir' produces '/dir/foo/bar'.

        Noteworthy special cases:
        - An absolute addition is returned as is and this path is dropped.
        - Resolving '' adds a trailing slash if not already present.
        - Whether this path is a directory is not known, resolving 'dir'
          from '/file' gives '/file/dir'.
        """
        add = self._coerce(addition)
        if self._count == 0 or add.is_absolute():
            return add
        return self._derive(seg.resolve(self._segments, add._segments, False))

    def abs(self, cwd: Union[str, Path, Any]) -> Path:
        """
        Make the path absolute, based on the given working directory.

        Path('img/ping.png').abs('/wwwroot/') gives '/wwwroot/img/ping.png'.
        Absolute paths are returned unchanged.

        Raises:
            NotAbsoluteError: If the working directory is not absolute
        """
        if self.is_absolute():
            return self
        cwd_path = self._coerce(cwd)
        if not cwd_path.is_absolute():
            raise _reject(NotAbsoluteError(cwd_path.get(), role='Working directory'))
        return cwd_path.assume_directory().resolve(self)

    # Relative paths

    def _anchor(
        self,
        directory: Union[str, Path, Any],
        target: Path,
        cwd: Optional[Union[str, Path, Any]]
    ) -> tuple[Path, Path]:
        """
        Normalize ``directory`` as a directory and make it and ``target``
        absolute, using ``cwd`` if one is given.
        """
        dir_path = self._coerce(directory)
        if dir_path.is_empty():
            raise _reject(EmptyPathError('Directory'))
        dir_path = dir_path.normalize().assume_directory()

        if not dir_path.is_absolute() and cwd is None:
            raise _reject(NotAbsoluteError(str(directory), role='Directory', needs_cwd=True))
        if not target.is_absolute() and cwd is None:
            raise _reject(NotAbsoluteError(self.get(), role='Path', needs_cwd=True))

        if cwd is not None:
            cwd_path = self._coerce(cwd).normalize().assume_directory()
            if not cwd_path.is_absolute():
                raise _reject(NotAbsoluteError(cwd_path.get(), role='Working directory'))
            if cwd_path.is_empty():
                raise _reject(EmptyPathError('Working directory'))
            dir_path = dir_path.abs(cwd_path).normalize()
            target = target.abs(cwd_path).normalize()

        return dir_path, target

    def is_in(
        self,
        directory: Union[str, Path, Any],
        cwd: Optional[Union[str, Path, Any]] = None
    ) -> bool:
        """
        Tests whether the path is within the given directory.

        Both paths are normalized and compared as strings, with the
        directory ending in '/'.

        Raises:
            InvalidArgumentError: If the directory is empty, or a path is
                relative and no absolute working directory is given
        """
        dir_path, target = self._anchor(directory, self.normalize(), cwd)
        inside = target.get().startswith(dir_path.get())
        _logger.debug(
            "Containment tested",
            context={'path': target.get(), 'directory': dir_path.get(), 'inside': inside}
        )
        return inside

    def relative_to(
        self,
        directory: Union[str, Path, Any],
        cwd: Optional[Union[str, Path, Any]] = None
    ) -> Path:
        """
        Gets the relative path to the given directory.

        Path('/var/wwwroot/js/script.js').relative_to('/var/wwwroot/')
        gives 'js/script.js'.

        With a working directory, relative paths can be used:
        Path('js/script.js').relative_to('.', '/var/wwwroot/') gives
        'js/script.js'.

        If this path is a directory it must end with a slash. The result
        is not normalized again.

        Raises:
            InvalidArgumentError: If the directory is empty, or a path is
                relative and no absolute working directory is given
        """
        dir_path, base = self._anchor(directory, self.normalize().dir(), cwd)

        i = seg.common_prefix_length(dir_path._segments, base._segments)
        remainder = base._segments[i:]
        outside_depth = dir_path._count - i - 1
        if outside_depth > 0:
            remainder = (seg.PARENT,) * outside_depth + remainder

        result = self._derive(remainder).resolve(self.filename())
        if result.is_empty():
            result = self._derive((seg.CURRENT, ''))

        _logger.debug(
            "Relative path computed",
            context={'path': self.get(), 'directory': dir_path.get(), 'result': result.get()}
        )
        return result

    # Component accessors

    def dir(self) -> Path:
        """
        Returns the directory part of the path.

        'dir/file' gives 'dir/', 'file' gives '', and '/a/..' gives '/a/../'.
        """
        return self._derive(seg.directory(self._segments))

    def dirname(self) -> str:
        """
        Get the directory name, for example '/foo/' for the path '/foo/file'.

        Noteworthy special cases:
        - It is empty if the path contains just a filename.
        - The path '/file' does have a directory name, so '/' is returned.
        - If the path ends with '.' or '..' it must refer to a directory,
          and a slash is appended.
        """
        return self.dir().get()

    def parent(self) -> Path:
        """Shortcut for ``dir().resolve('../')``."""
        return self.dir().resolve('../')

    def filename(self) -> str:
        """The filename portion of the path, '' if there is none."""
        return seg.filename(self._segments)

    def basename(self) -> str:
        """The filename without extension."""
        return seg.split_extension(self.filename())[0]

    def extension(self) -> str:
        """The extension of the filename, without the dot."""
        return seg.split_extension(self.filename())[1]
