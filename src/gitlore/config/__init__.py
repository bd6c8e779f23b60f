"""gitlore configuration.

This module provides the public API for gitlore configuration, loaded
from ``GITLORE_``-prefixed environment variables.

Example:
    >>> from gitlore.config import load_config
    >>> config = load_config({"GITLORE_LOGGING__LEVEL": "warning"})
    >>> config.logging.level
    <LogLevel.WARNING: 'warning'>
"""

from gitlore.exceptions import ConfigError

from ._load import ENV_PREFIX, load_config, parse_env_vars, set_nested_key
from ._models import GitloreConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "ENV_PREFIX",
    "ConfigError",
    "GitloreConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "load_config",
    "parse_env_vars",
    "set_nested_key",
]
