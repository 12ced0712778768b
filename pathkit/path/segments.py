"""
Path Segment Algorithms

Pure functions over segment tuples. A segment tuple is the result of
splitting a path string on '/': an empty first segment marks an absolute
path, an empty last segment marks a directory. A lone empty segment is
the root left over after collapsing 'dir/..' or taking the directory of
'file': it prints as '' but is absolute.

The ``Path`` value class wraps these; they are kept separate so that
each step can be reasoned about (and tested) on plain tuples.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Iterable, Optional, Tuple

CURRENT = '.'
PARENT = '..'
SEPARATOR = '/'

Segments = Tuple[str, ...]


def split(path: str) -> Segments:
    """
    Split a path string into segments.

    The empty string has no segments; every other string has
    ``path.count('/') + 1`` of them.
    """
    if path == '':
        return ()
    return tuple(path.split(SEPARATOR))


def join(segments: Iterable[str]) -> str:
    """Join segments back into a path string."""
    return SEPARATOR.join(segments)


def is_directory_reference(segment: Optional[str]) -> bool:
    """Check for '.' or '..'."""
    return segment == CURRENT or segment == PARENT


def normalize(segments: Segments) -> Segments:
    """
    Collapse '.' and '..' segments.

    - '..' pops the previous segment, unless there is nothing to pop or
      we are at the root, in which case it is kept.
    - '.' is dropped, unless it is the only segment.
    - A path ending in '.' or '..' names a directory, so the result
      gets a trailing empty segment.

    Note that 'dir/..' normalizes to '' while '.' normalizes to './'.
    """
    count = len(segments)
    result: list[str] = []

    for segment in segments:
        if segment == PARENT:
            if not result or result == ['']:
                result.append(segment)
            else:
                result.pop()
        elif segment == CURRENT and count > 1:
            continue
        else:
            result.append(segment)

    if count and is_directory_reference(segments[-1]):
        result.append('')

    return tuple(result)


def resolve(base: Segments, addition: Segments, addition_is_absolute: bool) -> Segments:
    """
    Append ``addition`` to ``base``.

    An absolute addition replaces the base, as does any addition to an
    empty base. Resolving an empty addition marks the base as a directory.
    """
    if not base or addition_is_absolute:
        return addition

    result = list(base)
    if result[-1] == '':
        result.pop()

    added = list(addition)
    if added and added[0] == '':
        added.pop(0)

    result.extend(added)
    if not addition:
        result.append('')

    return tuple(result)


def assume_directory(segments: Segments) -> Segments:
    """Append a trailing empty segment unless there already is one."""
    if segments and segments[-1] == '':
        return segments
    return segments + ('',)


def directory(segments: Segments) -> Segments:
    """
    The directory portion of a path.

    'dir/file' gives 'dir/', 'file' gives '', and paths ending in '.'
    or '..' keep that segment and become 'dir/../'.
    """
    if not segments:
        return ('',)

    last = segments[-1]
    if last == '':
        return segments
    if is_directory_reference(last):
        return segments + ('',)
    return segments[:-1] + ('',)


def filename(segments: Segments) -> str:
    """The last segment, or '' if it is empty, '.' or '..'."""
    if not segments:
        return ''
    last = segments[-1]
    if last == '' or is_directory_reference(last):
        return ''
    return last


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split a filename at its last dot.

    >>> split_extension('b.php.inc')
    ('b.php', 'inc')
    >>> split_extension('.htaccess')
    ('', 'htaccess')
    >>> split_extension('README')
    ('README', '')
    """
    root, dot, extension = name.rpartition('.')
    if not dot:
        return name, ''
    return root, extension


def common_prefix_length(a: Segments, b: Segments) -> int:
    """Number of leading segments ``a`` and ``b`` have in common."""
    i = 0
    limit = min(len(a), len(b))
    while i < limit and a[i] == b[i]:
        i += 1
    return i
