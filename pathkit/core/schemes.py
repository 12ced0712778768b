"""
pathkit Scheme Registry

Holds the scheme names that mark a path as absolute when it starts with
``name://``. Paths receive a registry when they are built; the module
also keeps a process default that follows the configuration.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from typing import Iterable, Optional, List
import threading

from pathkit.core.config_loader import get_config
from pathkit.exceptions import InvalidSchemeError
from pathkit.logger import get_logger


class SchemeRegistry:
    """
    Set of known scheme names.

    Lookups are exact and case-sensitive. Mutation is guarded by a lock,
    lookups read an immutable snapshot.

    Example:
        >>> registry = SchemeRegistry(['file', 's3'])
        >>> registry.is_known_scheme('s3')
        True
        >>> registry.is_known_scheme('S3')
        False
    """

    def __init__(self, names: Optional[Iterable[str]] = None):
        self._lock = threading.Lock()
        self._logger = get_logger('schemes')
        self._names: frozenset[str] = frozenset()
        for name in names or ():
            self.register(name)

    @staticmethod
    def _validate(name: object) -> str:
        if not isinstance(name, str):
            raise InvalidSchemeError(name, reason="not a string")
        if not name:
            raise InvalidSchemeError(name, reason="empty")
        if ':' in name or '/' in name:
            raise InvalidSchemeError(name, reason="contains ':' or '/'")
        return name

    def register(self, name: str) -> None:
        """
        Register a scheme name.

        Raises:
            InvalidSchemeError: If the name is empty or contains ':' or '/'
        """
        name = self._validate(name)
        with self._lock:
            if name in self._names:
                return
            self._names = self._names | {name}
        self._logger.debug("Registered scheme", context={'scheme': name})

    def unregister(self, name: str) -> bool:
        """Remove a scheme name. Returns False if it was not registered."""
        with self._lock:
            if name not in self._names:
                return False
            self._names = self._names - {name}
        self._logger.debug("Unregistered scheme", context={'scheme': name})
        return True

    def is_known_scheme(self, name: str) -> bool:
        """Check whether ``name`` is a registered scheme."""
        return name in self._names

    def names(self) -> List[str]:
        """Registered scheme names, sorted."""
        return sorted(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"SchemeRegistry({self.names()!r})"


_default_registry: Optional[SchemeRegistry] = None
_default_source: Optional[tuple[str, ...]] = None
_default_lock = threading.Lock()


def get_scheme_registry() -> SchemeRegistry:
    """
    Get the default scheme registry.

    Built from ``Config.schemes.known_schemes`` and rebuilt whenever that
    setting changes, so ``ConfigLoader.load``/``set``/``reset`` take effect
    on the next lookup. A registry installed with ``set_scheme_registry``
    is kept regardless of configuration until it is replaced.
    """
    global _default_registry, _default_source
    known = tuple(get_config().schemes.known_schemes)
    with _default_lock:
        if _default_registry is None or (
            _default_source is not None and _default_source != known
        ):
            _default_registry = SchemeRegistry(known)
            _default_source = known
        return _default_registry


def set_scheme_registry(registry: Optional[SchemeRegistry]) -> None:
    """
    Replace the default scheme registry.

    Passing ``None`` drops the current default so the next
    ``get_scheme_registry`` call rebuilds it from configuration.
    """
    global _default_registry, _default_source
    with _default_lock:
        _default_registry = registry
        _default_source = None
