"""Configuration file I/O (YAML/JSON load as dict)."""

import json
from typing import Any

import yaml

from rbln_feature_discovery.utils.errors import ConfigError


def load_yaml_file(filepath: str) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Args:
        filepath: Path to YAML file

    Returns:
        Loaded config as dict; empty dict if file is empty
    """
    with open(filepath, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{filepath}: top-level YAML value must be a mapping")
    return data if data is not None else {}


def load_json_file(filepath: str) -> dict[str, Any]:
    """Load a JSON file into a dictionary.

    Args:
        filepath: Path to JSON file

    Returns:
        Loaded config as dict; empty dict if file is empty
    """
    with open(filepath, encoding="utf-8") as f:
        data = json.load(f)
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{filepath}: top-level JSON value must be an object")
    return data if data is not None else {}


def load_config_file(filepath: str) -> dict[str, Any]:
    """Load a YAML or JSON config file chosen by extension.

    Raises:
        ConfigError: If the extension is unsupported or the file cannot be parsed
    """
    try:
        if filepath.endswith((".yaml", ".yml")):
            return load_yaml_file(filepath)
        if filepath.endswith(".json"):
            return load_json_file(filepath)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"failed to load config file {filepath}: {e}") from e
    raise ConfigError(f"unsupported config file type: {filepath}")
