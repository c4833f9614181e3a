# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
Inventory Configuration

Resolves the Mackerel API key, endpoint and timeout from command line
options, environment variables and an optional YAML config file.
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from mackerel_inventory.engine.errors import ConfigError, MissingCredentialError
from mackerel_inventory.sources.mackerel import DEFAULT_API_BASE, DEFAULT_TIMEOUT


ENV_API_KEY = "MACKEREL_API_KEY"
ENV_API_BASE = "MACKEREL_APIBASE"
ENV_TIMEOUT = "MACKEREL_INVENTORY_TIMEOUT"
ENV_CONFIG = "MACKEREL_INVENTORY_CONFIG"

DEFAULT_CONFIG_PATH = Path("~/.mackerel-inventory.yml")


@dataclass
class InventoryConfig:
    """
    Settings for one inventory run.

    Attributes:
        api_key: Mackerel API key (never printed)
        api_base: Base URL of the Mackerel API
        timeout: HTTP request timeout in seconds
        verbosity: Number of -v flags given
    """

    api_key: str = ""
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    verbosity: int = 0

    def __repr__(self) -> str:
        masked = "***" if self.api_key else ""
        return (
            f"InventoryConfig(api_key={masked!r}, api_base={self.api_base!r}, "
            f"timeout={self.timeout!r}, verbosity={self.verbosity!r})"
        )


def load_config_file(path: Path) -> Dict[str, Any]:
    """Load a YAML config file into a dict."""
    try:
        content = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e.strerror or e}", file_path=str(path)) from e

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", file_path=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping", file_path=str(path))
    return data


def _find_config_file(
    config_path: Optional[str], environ: Mapping[str, str]
) -> Optional[Path]:
    """Pick the config file to read; only the default location may be absent."""
    explicit = config_path or environ.get(ENV_CONFIG)
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ConfigError("Config file does not exist", file_path=str(path))
        return path

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.is_file():
        return default
    return None


def _parse_timeout(value: Any, source: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout {value!r} from {source}") from None
    if not math.isfinite(timeout):
        raise ConfigError(f"Timeout must be a finite number, got {value!r} from {source}")
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {value!r} from {source}")
    return timeout


def resolve_config(
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    timeout: Optional[float] = None,
    config_path: Optional[str] = None,
    verbosity: int = 0,
    environ: Optional[Mapping[str, str]] = None,
) -> InventoryConfig:
    """
    Build the effective configuration.

    Precedence, highest first: explicit arguments, environment, config
    file, defaults.

    Raises:
        MissingCredentialError: if no API key is found anywhere
        ConfigError: if the config file or a setting is invalid
    """
    if environ is None:
        environ = os.environ

    file_data: Dict[str, Any] = {}
    path = _find_config_file(config_path, environ)
    if path is not None:
        file_data = load_config_file(path)

    config = InventoryConfig(verbosity=verbosity)

    config.api_key = str(
        api_key or environ.get(ENV_API_KEY) or file_data.get('apikey') or ""
    ).strip()
    if not config.api_key:
        raise MissingCredentialError()

    config.api_base = str(
        api_base or environ.get(ENV_API_BASE) or file_data.get('apibase') or DEFAULT_API_BASE
    )

    if timeout is not None:
        config.timeout = _parse_timeout(timeout, "--timeout")
    elif environ.get(ENV_TIMEOUT):
        config.timeout = _parse_timeout(environ[ENV_TIMEOUT], ENV_TIMEOUT)
    elif file_data.get('timeout') is not None:
        config.timeout = _parse_timeout(file_data['timeout'], str(path))

    return config
