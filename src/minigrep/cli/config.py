#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the minigrep CLI.

Configuration files carry ambient settings only (``log_level``,
``log_file``, ``trace``). They are looked up in this order:

1. The path named by ``MINIGREP_CONFIG``
2. ``.minigrep.toml``, ``.minigrep.yaml``, ``.minigrep.yml``,
   ``.minigrep.json`` or ``pyproject.toml`` with a ``[tool.minigrep]``
   table, from the current directory up to the filesystem root
3. The same dotfiles in the user's home directory
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from minigrep.constants import (
    CONFIG_DOTFILES,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    PYPROJECT_FILENAME,
    PYPROJECT_TOOL_SECTION,
    TRACE_ENV_VAR,
    TRUTHY_VALUES,
)
from minigrep.exceptions import ConfigFileError

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.minigrep]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.
    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Error reading {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to the first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_DOTFILES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # pyproject.toml only counts when it has a [tool.minigrep] table
        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigFileError:
                logger.debug("Skipping unreadable %s during config discovery", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parent chain, then the home directory."""
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_DOTFILES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigFileError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    if not config_path.is_file():
        raise ConfigFileError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)

    raise ConfigFileError(
        f"Unsupported config file format: {ext or config_path.name}. Use .toml, .yaml or .json",
        config_path=str(config_path),
    )


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Error reading TOML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigFileError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(
            f"Error reading JSON config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigFileError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigFileError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(
            f"Error reading YAML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_with_priority(env_var_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from ``env_var_path`` or, failing that, discovery.

    Returns an empty dict when no configuration file is found.

    Raises
    ------
    ConfigFileError
        If a config file is named or found but cannot be loaded

    """
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug("Using configuration file %s", discovered_path)
        return load_config_file(discovered_path)

    return {}


def _is_truthy(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_VALUES


def resolve_logging_settings(config: Mapping[str, Any], environ: Mapping[str, str]) -> Dict[str, Any]:
    """Merge logging settings from the environment over the config file.

    Parameters
    ----------
    config : Mapping[str, Any]
        Loaded configuration dictionary
    environ : Mapping[str, str]
        Process environment

    Returns
    -------
    dict
        ``log_level`` (level name or number, as given), ``log_file`` (str or None) and ``trace`` (bool)

    """
    log_level = environ.get(LOG_LEVEL_ENV_VAR) or config.get("log_level") or DEFAULT_LOG_LEVEL
    log_file = environ.get(LOG_FILE_ENV_VAR) or config.get("log_file") or None

    if TRACE_ENV_VAR in environ:
        trace = _is_truthy(environ[TRACE_ENV_VAR])
    else:
        trace = _is_truthy(config.get("trace", False))

    return {
        "log_level": "DEBUG" if trace else log_level,
        "log_file": str(log_file) if log_file else None,
        "trace": trace,
    }


__all__ = [
    "discover_config_file",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "resolve_logging_settings",
]
