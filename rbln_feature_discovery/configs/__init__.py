"""Configuration loading for rbln_feature_discovery."""

from .config import (
    DEFAULT_DAEMON_URL,
    DEFAULT_OUTPUT_FILE,
    ENV_PREFIX,
    Config,
    ConfigManager,
    parse_bool,
    strip_scheme_prefix,
)
from .config_io import load_config_file, load_json_file, load_yaml_file

__all__ = [
    "DEFAULT_DAEMON_URL",
    "DEFAULT_OUTPUT_FILE",
    "ENV_PREFIX",
    "Config",
    "ConfigManager",
    "parse_bool",
    "strip_scheme_prefix",
    "load_config_file",
    "load_json_file",
    "load_yaml_file",
]
