"""Environment configuration loading."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from gitlore.exceptions import ConfigError

from ._models import GitloreConfig, LogLevel

ENV_PREFIX = "GITLORE_"


def set_nested_key(
    data: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    key_path: str,
    value: object,
) -> None:
    """Set a value in a nested dictionary using a dot-separated key path.

    Intermediate dictionaries are created as needed.

    Args:
        data: Dictionary to modify in place.
        key_path: Dot-separated key path (e.g., "logging.level").
        value: Value to set.
    """
    keys = key_path.split(".")
    current = data
    for key in keys[:-1]:
        nested = current.get(key)
        if not isinstance(nested, dict):
            nested = {}
            current[key] = nested
        current = nested  # pyright: ignore[reportUnknownVariableType]
    current[keys[-1]] = value


def parse_env_vars(
    environ: Mapping[str, str],
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse environment variables into a config dictionary.

    Args:
        environ: Environment mapping to read from.
        prefix: Environment variable prefix (default: "GITLORE_").

    Returns:
        Dictionary of config values with nested structure.

    Environment variable naming:
        - Add prefix (GITLORE_)
        - Convert to uppercase
        - Replace dots with double underscores
        - Example: logging.level -> GITLORE_LOGGING__LEVEL
    """
    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]

    for key, value in environ.items():
        if not key.startswith(prefix):
            continue

        # GITLORE_LOGGING__LEVEL -> logging.level
        config_key = key[len(prefix) :]
        if not config_key:
            continue

        config_path = config_key.replace("__", ".").lower()
        set_nested_key(result, config_path, value)

    return result


def load_config(environ: Mapping[str, str] | None = None) -> GitloreConfig:
    """Load configuration from environment variables.

    GITLORE_DEBUG, when set to any non-empty value, forces the debug log level
    regardless of GITLORE_LOGGING__LEVEL.

    Args:
        environ: Environment mapping to read. Defaults to os.environ.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If a variable holds a value the model rejects.
    """
    env = os.environ if environ is None else environ
    values = parse_env_vars(env)

    if values.pop("debug", None):
        set_nested_key(values, "logging.level", LogLevel.DEBUG.value)

    try:
        return GitloreConfig.model_validate(values)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error.get("loc", ()))
        msg = f"Invalid configuration value for '{key}': {error.get('msg')}"
        raise ConfigError(msg, key=key) from e
