"""
pathkit Core Module

Support components for the path engine:
- Configuration Loader
- Scheme Registry
"""

from .config_loader import (
    ConfigLoader,
    Config,
    SchemeConfig,
    LoggingConfig,
    get_config,
)
from .schemes import SchemeRegistry, get_scheme_registry, set_scheme_registry

__all__ = [
    # Config
    'ConfigLoader',
    'Config',
    'SchemeConfig',
    'LoggingConfig',
    'get_config',
    # Schemes
    'SchemeRegistry',
    'get_scheme_registry',
    'set_scheme_registry',
]
