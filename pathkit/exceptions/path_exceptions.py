"""
Path Exceptions

Exceptions raised by path construction, resolution and comparison,
and by the scheme registry and configuration loader that support them.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class PathKitError(Exception):
    """
    Base exception for all pathkit errors.

    Attributes:
        message: Human-readable error description
        path: Path string associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 5000
        self.context = context or {}
        if path is not None:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class InvalidArgumentError(PathKitError, ValueError):
    """
    An argument cannot be used as a path in the requested operation.

    This is the single error kind raised by path operations. The
    subclasses below only refine the reason; callers that don't care
    catch this class.

    Example:
        >>> raise InvalidArgumentError("Directory is empty.")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            path=path,
            error_code=error_code or 5001,
            context=context
        )


class InvalidPathTypeError(InvalidArgumentError, TypeError):
    """
    The value is neither a string, a Path nor a string-convertible object.

    Example:
        >>> raise InvalidPathTypeError(42)
    """

    def __init__(
        self,
        value: Any,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["type"] = type(value).__name__
        super().__init__(
            message=f"Expected a path string, got {type(value).__name__}",
            error_code=5002,
            context=ctx
        )
        self.value = value


class EmptyPathError(InvalidArgumentError):
    """
    A directory or working directory parses to an empty path.

    Example:
        >>> raise EmptyPathError("Directory")
    """

    def __init__(
        self,
        role: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{role} is empty.",
            error_code=5003,
            context=context
        )
        self.role = role


class NotAbsoluteError(InvalidArgumentError):
    """
    A path must be absolute, or a working directory must be supplied.

    Example:
        >>> raise NotAbsoluteError("img/", role="Working directory")
    """

    def __init__(
        self,
        path: str,
        role: str = "Path",
        needs_cwd: bool = False,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        if needs_cwd:
            message = (
                f'{role} "{path}" is not absolute, '
                f'you have to provide a working directory.'
            )
        else:
            message = f'{role} "{path}" must be absolute.'
        super().__init__(
            message=message,
            path=path,
            error_code=5004,
            context=context
        )
        self.role = role
        self.needs_cwd = needs_cwd


class InvalidSchemeError(InvalidArgumentError):
    """
    A scheme name cannot be registered.

    Example:
        >>> raise InvalidSchemeError("a/b", reason="contains '/'")
    """

    def __init__(
        self,
        name: Any,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid scheme name: {name!r}",
            error_code=5005,
            context=ctx
        )
        self.name = name
        self.reason = reason


class ConfigValidationError(PathKitError):
    """Raised when configuration loading or validation fails."""

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if config_path:
            ctx["config_path"] = config_path
        super().__init__(
            message=message,
            error_code=5100,
            context=ctx
        )
        self.config_path = config_path
