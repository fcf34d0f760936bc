#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for txtdoc.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON format, reading ``TXTDOC_*`` environment
variables, and building renderer options from the merged result.

Settings are resolved with the following priority (highest first):

1. Command line flags
2. ``TXTDOC_*`` environment variables (e.g. ``TXTDOC_MAX_WIDTH``)
3. The configuration file
4. Defaults of :class:`~txtdoc.options.txt.TxtRendererOptions`
"""

import json
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from txtdoc.constants import CONFIG_FILENAMES, ENV_PREFIX, PYPROJECT_TOOL_SECTION
from txtdoc.exceptions import ConfigError
from txtdoc.options.txt import TxtRendererOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = f"{ENV_PREFIX}CONFIG"


def _normalize_key(key: str) -> str:
    return key.strip().lower().replace("-", "_")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.txtdoc] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.txtdoc], or empty dict if not found

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    tool = data.get("tool", {})
    if PYPROJECT_TOOL_SECTION not in tool:
        return {}

    config = tool[PYPROJECT_TOOL_SECTION]
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for, in priority order:

    1. .txtdoc.toml
    2. .txtdoc.yaml
    3. .txtdoc.yml
    4. .txtdoc.json
    5. pyproject.toml (only with a [tool.txtdoc] section)

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                # An unreadable pyproject.toml is not ours; keep looking
                logger.debug(f"Skipping {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches parent directories first (see :func:`find_config_in_parents`),
    then the user's home directory for the dedicated config file names.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is picked from the file name and extension. For pyproject.toml
    only the [tool.txtdoc] section is returned.

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
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".txtdoc.toml")
    >>> config.get("max_width")
    72

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise ConfigError(
            f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", str(config_path)
        )

    logger.debug(f"Loaded configuration from {config_path}: {config}")
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading TOML config {config_path}: {e}", str(config_path), e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading JSON config {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading YAML config {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", str(config_path)
        )
    return config


def get_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect option values from ``TXTDOC_*`` environment variables.

    Only variables naming a renderer option are returned (``TXTDOC_MAX_WIDTH``
    becomes ``max_width``); values are left as strings.

    Parameters
    ----------
    environ : Mapping, optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    dict
        Option name to raw string value

    """
    if environ is None:
        environ = os.environ

    overrides: Dict[str, str] = {}
    for name in TxtRendererOptions.field_names():
        env_key = f"{ENV_PREFIX}{name.upper()}"
        value = environ.get(env_key)
        if value is not None:
            overrides[name] = value
    return overrides


def options_from_config(
    config: Mapping[str, Any],
    base: Optional[TxtRendererOptions] = None,
    source: Optional[str] = None,
) -> TxtRendererOptions:
    """Build renderer options from a configuration mapping.

    Keys may use dashes or underscores (``max-width`` or ``max_width``).
    String values are converted to the field's type, so the output of
    :func:`get_env_overrides` can be passed directly.

    Parameters
    ----------
    config : Mapping
        Option values
    base : TxtRendererOptions, optional
        Options to update, defaults to a default-constructed instance
    source : str, optional
        Where the values came from, used in error messages

    Returns
    -------
    TxtRendererOptions
        The updated options

    Raises
    ------
    ConfigError
        If a key is not a known option or a value is invalid

    """
    if base is None:
        base = TxtRendererOptions()

    option_fields = {f.name: f for f in fields(TxtRendererOptions)}
    where = f" in {source}" if source else ""
    updates: Dict[str, Any] = {}

    for raw_key, value in config.items():
        key = _normalize_key(str(raw_key))
        if key not in option_fields:
            raise ConfigError(
                f"Unknown option '{raw_key}'{where}. Valid options: {', '.join(sorted(option_fields))}",
                source,
            )

        field_type = option_fields[key].metadata.get("type")
        if field_type is not None and isinstance(value, str):
            try:
                value = field_type(value.strip())
            except ValueError as e:
                raise ConfigError(f"Invalid value for '{raw_key}'{where}: {value!r}", source, e) from e
        updates[key] = value

    if not updates:
        return base

    try:
        return base.create_updated(**updates)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration{where}: {e}", source, e) from e


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    no_config: bool = False,
) -> tuple[Dict[str, Any], Optional[Path]]:
    """Load the configuration file with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (TXTDOC_CONFIG)
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path from --config flag
    env_var_path : str, optional
        Config file path from TXTDOC_CONFIG environment variable
    no_config : bool, default False
        Skip discovery (an explicit path is still loaded)

    Returns
    -------
    tuple of (dict, Path or None)
        The configuration and the file it came from (``({}, None)`` if none)

    Raises
    ------
    ConfigError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        path = Path(explicit_path)
    elif no_config:
        return {}, None
    elif env_var_path:
        path = Path(env_var_path)
    else:
        discovered = discover_config_file()
        if discovered is None:
            return {}, None
        path = discovered

    return load_config_file(path), path


__all__ = [
    "CONFIG_ENV_VAR",
    "discover_config_file",
    "find_config_in_parents",
    "get_env_overrides",
    "load_config_file",
    "load_config_with_priority",
    "options_from_config",
]
