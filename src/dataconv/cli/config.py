#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the dataconv CLI.

A configuration file holds default parser and renderer options per format::

    [markup.renderer]
    root_name = "data"
    xml_declaration = true

    [tabular.parser]
    delimiter = ";"

Files are found by walking up from the working directory, then in the home
directory, and may be TOML, YAML, JSON or the ``[tool.dataconv]`` table of a
``pyproject.toml``.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from dataconv.converter_registry import registry
from dataconv.exceptions import FormatError
from dataconv.options.base import BaseParserOptions, BaseRendererOptions

CONFIG_ENV_VAR = "DATACONV_CONFIG"
DEDICATED_CONFIG_FILENAMES = [".dataconv.toml", ".dataconv.yaml", ".dataconv.yml", ".dataconv.json"]
CONFIG_ROLES = ("parser", "renderer")


def _load_pyproject_dataconv_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.dataconv] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.dataconv] section, or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("dataconv")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.dataconv] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for ``.dataconv.toml``, ``.dataconv.yaml``,
    ``.dataconv.yml``, ``.dataconv.json`` and finally a ``pyproject.toml``
    with a ``[tool.dataconv]`` section.

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
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_dataconv_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Unreadable pyproject.toml; keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Parent directories of ``start_dir`` (default: the working directory) are
    searched first, then the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

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
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_dataconv_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> base = {"tabular": {"parser": {"delimiter": ";"}}}
    >>> override = {"tabular": {"renderer": {"delimiter": "|"}}}
    >>> merge_configs(base, override)
    {'tabular': {'parser': {'delimiter': ';'}, 'renderer': {'delimiter': '|'}}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (DATACONV_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def _options_section(config: Dict[str, Any], format_name: str, role: str) -> Dict[str, Any]:
    """Collect one ``[format.role]`` table, accepting format aliases as section names."""
    values: Dict[str, Any] = {}
    for section_name, section in config.items():
        try:
            if registry.resolve_format(str(section_name)) != format_name:
                continue
        except FormatError as e:
            raise argparse.ArgumentTypeError(f"Unknown config section [{section_name}]: {e.message}") from e
        if not isinstance(section, dict):
            raise argparse.ArgumentTypeError(f"Config section [{section_name}] must be a table")
        unknown = sorted(set(section) - set(CONFIG_ROLES))
        if unknown:
            raise argparse.ArgumentTypeError(
                f"Unknown key(s) in [{section_name}]: {', '.join(unknown)}. Valid keys: {', '.join(CONFIG_ROLES)}"
            )
        role_values = section.get(role, {})
        if not isinstance(role_values, dict):
            raise argparse.ArgumentTypeError(f"Config section [{section_name}.{role}] must be a table")
        values = merge_configs(values, role_values)
    return values


def parser_options_from_config(config: Dict[str, Any], format_name: str) -> Optional[BaseParserOptions]:
    """Build the parser options for ``format_name`` from a loaded configuration.

    Returns
    -------
    BaseParserOptions or None
        Options built from the ``[format.parser]`` table, or None when the
        configuration has no such table

    Raises
    ------
    argparse.ArgumentTypeError
        If the table contains unknown option names or invalid values

    """
    return _build_options(config, format_name, "parser")


def renderer_options_from_config(config: Dict[str, Any], format_name: str) -> Optional[BaseRendererOptions]:
    """Build the renderer options for ``format_name`` from a loaded configuration.

    See :func:`parser_options_from_config`.
    """
    return _build_options(config, format_name, "renderer")


def _build_options(config: Dict[str, Any], format_name: str, role: str) -> Any:
    canonical = registry.resolve_format(format_name)
    values = _options_section(config, canonical, role)
    if not values:
        return None
    if role == "parser":
        options_class = registry.get_parser_options_class(canonical)
    else:
        options_class = registry.get_renderer_options_class(canonical)
    try:
        return options_class.from_mapping(values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid [{canonical}.{role}] configuration: {e}") from e


def validate_config(config: Dict[str, Any]) -> None:
    """Check every section of a configuration without keeping the options.

    Raises
    ------
    argparse.ArgumentTypeError
        On the first unknown section, key, or invalid value

    """
    for format_name in registry.list_formats():
        parser_options_from_config(config, format_name)
        renderer_options_from_config(config, format_name)
