"""
pathkit Logger Module

Logging for the path engine and its command-line tool:
- Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Component-specific loggers under the ``pathkit`` namespace
- Structured context data rendered as ``{key=value}``
- Bounded in-memory buffer for inspection from tests and tools
- Thread-safe operation

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List
from functools import wraps


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Look up a level by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormatter(logging.Formatter):
    """
    Log formatter for pathkit.

    Output looks like::

        [2024-01-01 12:00:00.000] DEBUG    [path] Relative path computed {path='/a/b'}
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        """Check if stderr is a TTY."""
        if not hasattr(sys.stderr, 'isatty'):
            return False
        return sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'component'):
            components.append(f"[{record.component}]")

        components.append(str(record.getMessage()))

        if getattr(record, 'context', None):
            context_str = " ".join(f"{k}={v!r}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        message = " ".join(components)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class MemoryLogHandler(logging.Handler):
    """
    Keeps the most recent log records in memory.

    Lets callers look at what the engine did without parsing console
    output.
    """

    def __init__(self, max_entries: int = 1000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'component': getattr(record, 'component', None),
            'context': getattr(record, 'context', {}),
        }

        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]

    def get_logs(
        self,
        level: Optional[str] = None,
        component: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [l for l in logs if l['level'] == level]
        if component:
            logs = [l for l in logs if l['component'] == component]

        return logs[-limit:]

    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Component logger for pathkit.

    One instance exists per component name; all of them write through the
    ``pathkit`` stdlib logger, so applications embedding the library can
    configure it with plain ``logging`` calls instead of ``initialize``.

    Example:
        >>> log = Logger('path')
        >>> log.debug("Normalized path", context={'path': 'a/./b'})
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _memory_handler: Optional[MemoryLogHandler] = None
    _handlers: List[logging.Handler] = []

    def __new__(cls, component: str = 'path') -> 'Logger':
        """Get or create a logger for a component."""
        with cls._lock:
            if component not in cls._instances:
                instance = super().__new__(cls)
                instance._component = component
                instance._logger = logging.getLogger(f'pathkit.{component}')
                cls._instances[component] = instance
            return cls._instances[component]

    @property
    def component(self) -> str:
        """Get the component name."""
        return self._component

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.WARNING,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console_output: bool = True,
        buffer_size: int = 1000
    ) -> None:
        """
        Attach pathkit's handlers to the ``pathkit`` logger.

        Safe to call more than once; later calls only adjust the level.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console_output: Whether to log to stderr
            buffer_size: Number of records kept by the memory handler
        """
        root_logger = logging.getLogger('pathkit')

        with cls._lock:
            root_logger.setLevel(level)
            if cls._initialized:
                for handler in cls._handlers:
                    handler.setLevel(level)
                return

            cls._memory_handler = MemoryLogHandler(max_entries=buffer_size)
            cls._handlers = [cls._memory_handler]

            if console_output:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                cls._handlers.append(console_handler)

            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                cls._handlers.append(file_handler)

            for handler in cls._handlers:
                handler.setLevel(level)
                root_logger.addHandler(handler)

            cls._initialized = True

    @classmethod
    def shutdown(cls) -> None:
        """Detach and close the handlers added by ``initialize``."""
        root_logger = logging.getLogger('pathkit')
        with cls._lock:
            for handler in cls._handlers:
                root_logger.removeHandler(handler)
                handler.close()
            cls._handlers = []
            cls._memory_handler = None
            cls._initialized = False

    @classmethod
    def get_buffered_logs(
        cls,
        level: Optional[str] = None,
        component: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get logs from the in-memory buffer."""
        if cls._memory_handler is None:
            return []
        return cls._memory_handler.get_logs(level=level, component=component, limit=limit)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        extra = {
            'component': self._component,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)

    def error(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, context)

    def critical(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a critical message."""
        self._log(LogLevel.CRITICAL, message, context)

    def exception(
        self,
        message: str,
        exc: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log an exception with stack trace."""
        self._logger.error(
            message,
            exc_info=exc if exc is not None else True,
            extra={
                'component': self._component,
                'context': context or {},
            }
        )


def log_function_call(logger: Optional[Logger] = None):
    """
    Decorator to log calls at DEBUG level.

    Example:
        >>> @log_function_call()
        ... def relative(path, directory):
        ...     ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            nonlocal logger
            if logger is None:
                logger = Logger('function')

            func_name = func.__qualname__
            if logger.is_enabled_for(LogLevel.DEBUG):
                logger.debug(
                    f"Calling {func_name}",
                    context={'args': str(args)[:100], 'kwargs': str(kwargs)[:100]}
                )

            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.debug(f"{func_name} raised {type(e).__name__}: {e}")
                raise

        return wrapper
    return decorator


def get_logger(component: str) -> Logger:
    """
    Get a logger for the specified component.

    Args:
        component: Name of the component (e.g., 'path', 'schemes', 'cli')

    Returns:
        Logger instance for the component
    """
    return Logger(component)
