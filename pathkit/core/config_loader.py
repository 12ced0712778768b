"""
pathkit Configuration Loader

Configuration management for the path engine:
- JSON configuration file loading
- Type validation of known settings
- Default value handling
- Runtime configuration updates through dot-notation keys

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, List
import threading

from pathkit.exceptions import ConfigValidationError


DEFAULT_SCHEMES = [
    "file", "http", "https", "ftp", "ftps", "data", "glob", "phar", "zip",
]


@dataclass
class SchemeConfig:
    """Scheme names treated as absolute prefixes (``name://``)."""
    known_schemes: List[str] = field(default_factory=lambda: list(DEFAULT_SCHEMES))


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True
    buffer_size: int = 1000


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for pathkit.
    """
    schemes: SchemeConfig = field(default_factory=SchemeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('pathkit.json')
        >>> config.schemes.known_schemes
        ['file', 's3']
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigValidationError: If the file cannot be loaded, parsed or validated
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigValidationError(
                f"Configuration file not found: {config_path}",
                config_path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(
                f"Invalid JSON in configuration file: {e}",
                config_path=config_path
            )
        except OSError as e:
            raise ConfigValidationError(
                f"Cannot read configuration file: {e}",
                config_path=config_path
            )

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration root must be an object",
                config_path=config_path
            )

        config = self._parse_config(data)
        with self._lock:
            self._config = config
            self._loaded = True
        return config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'schemes' in data:
            scheme_data = self._section(data, 'schemes')
            known = scheme_data.get('known_schemes', config.schemes.known_schemes)
            if not isinstance(known, list) or not all(isinstance(n, str) for n in known):
                raise ConfigValidationError("schemes.known_schemes must be a list of strings")
            config.schemes = SchemeConfig(known_schemes=list(known))

        if 'logging' in data:
            log_data = self._section(data, 'logging')
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
                buffer_size=log_data.get('buffer_size', config.logging.buffer_size),
            )
            if not isinstance(config.logging.level, str):
                raise ConfigValidationError("logging.level must be a string")
            if not isinstance(config.logging.buffer_size, int) or config.logging.buffer_size < 1:
                raise ConfigValidationError("logging.buffer_size must be a positive integer")

        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data[name]
        if not isinstance(section, dict):
            raise ConfigValidationError(f"Configuration section '{name}' must be an object")
        return section

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        """Whether a configuration file has been loaded."""
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'logging.level')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigValidationError(f"Invalid configuration key: {key}")

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def reset(self) -> None:
        """Drop any loaded configuration and return to the defaults."""
        with self._lock:
            self._config = Config()
            self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
