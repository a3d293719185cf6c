"""Utility functions for application configuration management.

Configuration is resolved in two layers:

    1. An optional YAML document, looked up in this order:
       - the `path` argument of load_config();
       - the file named by `SHORTENER_CONFIG_FILE`;
       - `<project root>/config/<app env>.yml`, when it exists.
    2. Environment variables, which override the YAML values.

The YAML document follows this structure (every key is optional):

    base_url: https://sho.rt
    seed_demo_data: false
    shortcode_length: 6
    click_history_limit: 100
    log_level: INFO

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    load_config(path: str | Path | None = None) -> ShortenerConfig
        Resolve the shortener configuration.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> config = load_config()
    >>> config.base_url
    'http://localhost:5002'
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from linkshortener.exceptions import BadConfigurationError
from linkshortener.utils.constants import (
    APP_ENV_ENV,
    PROJECT_ROOT_ENV,
    LOG_LEVEL_ENV,
    CONFIG_FILE_ENV,
    BASE_URL_ENV,
    SEED_DEMO_DATA_ENV,
    SHORTCODE_LENGTH_ENV,
    CLICK_HISTORY_LIMIT_ENV,
    DEFAULT_BASE_URL,
    SHORTCODE_LENGTH,
    CLICK_HISTORY_LIMIT,
)


logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class ShortenerConfig:
    """Process-wide shortener settings.

    Attributes:
        base_url (str):
            Public base URL used to display short URLs.
        seed_demo_data (bool):
            Insert the demonstration short URLs at start.
        shortcode_length (int):
            Length of generated shortcodes.
        click_history_limit (int):
            Maximum number of click events retained per short URL.
        log_level (str):
            Root log level.
    """
    base_url: str = DEFAULT_BASE_URL
    seed_demo_data: bool = True
    shortcode_length: int = SHORTCODE_LENGTH
    click_history_limit: int = CLICK_HISTORY_LIMIT
    log_level: str = 'INFO'


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Uses the PROJECT_ROOT environment variable.
    Falls back to the current working directory.
    """
    return Path(os.environ.get(PROJECT_ROOT_ENV, os.getcwd()))


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise BadConfigurationError(f"Invalid boolean for '{name}' (given value: {value!r}).")


def _parse_positive_int(name: str, value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f"Invalid integer for '{name}' (given value: {value!r}).") from e
    if isinstance(value, bool) or number < 1:
        raise BadConfigurationError(f"'{name}' must be a positive integer (given value: {value!r}).")
    return number


def _config_file(path: str | Path | None) -> Path | None:
    if path is not None:
        return Path(path)
    if os.environ.get(CONFIG_FILE_ENV):
        return Path(os.environ[CONFIG_FILE_ENV])

    default = project_root() / 'config' / f'{app_env()}.yml'
    return default if default.is_file() else None


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open(encoding='utf-8') as f:
        document = yaml.safe_load(f) or {}
    if not isinstance(document, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a YAML mapping.')
    return document


def load_config(path: str | Path | None = None) -> ShortenerConfig:
    """Load the shortener configuration from YAML and environment variables

    Args:
        path (Optional[str | Path]):
            Explicit YAML configuration file. A missing explicit file raises
            FileNotFoundError.

    Returns:
        ShortenerConfig: resolved configuration.

    Raises:
        FileNotFoundError:
            If an explicitly requested configuration file doesn't exist.
        BadConfigurationError:
            If any configuration value is invalid.

    Example:
        >>> os.environ['BASE_URL'] = 'https://sho.rt'
        >>> load_config().base_url
        'https://sho.rt'
    """
    values: dict[str, Any] = {}

    config_file = _config_file(path)
    if config_file is not None:
        logger.debug('Loading configuration file.', extra={'configFile': str(config_file)})
        values.update(_load_yaml(config_file))

    overrides = {
        'base_url': BASE_URL_ENV,
        'seed_demo_data': SEED_DEMO_DATA_ENV,
        'shortcode_length': SHORTCODE_LENGTH_ENV,
        'click_history_limit': CLICK_HISTORY_LIMIT_ENV,
        'log_level': LOG_LEVEL_ENV,
    }
    for key, env in overrides.items():
        if os.environ.get(env):
            values[key] = os.environ[env]

    unknown = set(values) - set(overrides)
    if unknown:
        raise BadConfigurationError(f'Unknown configuration keys: {", ".join(sorted(unknown))}.')

    defaults = ShortenerConfig()
    base_url = str(values.get('base_url', defaults.base_url))
    if not base_url:
        raise BadConfigurationError("'base_url' must be a non-empty string.")

    return ShortenerConfig(
        base_url=base_url,
        seed_demo_data=_parse_bool('seed_demo_data', values.get('seed_demo_data', defaults.seed_demo_data)),
        shortcode_length=_parse_positive_int('shortcode_length', values.get('shortcode_length', defaults.shortcode_length)),
        click_history_limit=_parse_positive_int(
            'click_history_limit', values.get('click_history_limit', defaults.click_history_limit)
        ),
        log_level=str(values.get('log_level', defaults.log_level)).upper(),
    )
