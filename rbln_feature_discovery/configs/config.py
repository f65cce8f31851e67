"""Configuration for rbln-npu-feature-discovery.

Values are layered: defaults, then an optional YAML/JSON file, then
``RBLN_NPU_FEATURE_DISCOVERY_*`` environment variables, then command-line
flags. finalize() validates the result and normalizes the daemon URL.
"""

from dataclasses import asdict, dataclass, fields
import logging
import os
from typing import Any, Callable, Optional

from rbln_feature_discovery.configs.config_io import load_config_file
from rbln_feature_discovery.utils.errors import ConfigError

ENV_PREFIX = "RBLN_NPU_FEATURE_DISCOVERY_"

DEFAULT_DAEMON_URL = "127.0.0.1:50051"
DEFAULT_OUTPUT_FILE = "/etc/kubernetes/node-feature-discovery/features.d/rbln-features"
DEFAULT_DAEMON_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off"}

LOGGER = logging.getLogger(__name__)


def parse_bool(value: Any, default: bool) -> bool:
    """Parse a boolean from config or environment; unknown strings keep ``default``."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return default


def strip_scheme_prefix(address: str) -> str:
    """Drop an http:// or https:// prefix; gRPC targets are plain host:port."""
    for scheme in ("http://", "https://"):
        if address.startswith(scheme):
            return address[len(scheme) :]
    return address


@dataclass
class Config:
    """Runtime configuration consumed by the feature collector.

    Attributes:
        rbln_daemon_url: Endpoint of the RBLN daemon gRPC server
        output_file: Label file read by node-feature-discovery
        no_timestamp: Skip the ``# +expiry-time=`` annotation
        daemon_timeout: Seconds allowed for dialing the daemon and for each RPC
        log_level: Logging level name
    """

    rbln_daemon_url: str = DEFAULT_DAEMON_URL
    output_file: str = DEFAULT_OUTPUT_FILE
    no_timestamp: bool = False
    daemon_timeout: float = DEFAULT_DAEMON_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    def update(self, values: dict[str, Any]) -> None:
        """Apply overrides; keys may use dashes or underscores.

        Raises:
            ConfigError: On unknown keys or values of the wrong type
        """
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigError(f"unknown configuration key: {key}")
            if value is None:
                continue
            if name == "no_timestamp":
                value = parse_bool(value, self.no_timestamp)
            elif name == "daemon_timeout":
                try:
                    value = float(value)
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"daemon_timeout must be a number, got {value!r}") from e
            else:
                value = str(value)
            setattr(self, name, value)

    def finalize(self) -> "Config":
        """Validate values and normalize the daemon URL.

        Raises:
            ConfigError: If a value is out of range
        """
        if self.daemon_timeout <= 0:
            raise ConfigError(f"daemon_timeout must be positive, got {self.daemon_timeout}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"unknown log level: {self.log_level}")
        if not self.output_file:
            raise ConfigError("output_file must not be empty")
        self.rbln_daemon_url = strip_scheme_prefix(self.rbln_daemon_url)
        return self

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ConfigManager:
    """Builds a Config from files, environment and explicit overrides."""

    @staticmethod
    def load_env(getenv: Callable[[str], Optional[str]] = os.environ.get) -> dict[str, Any]:
        """Read ``RBLN_NPU_FEATURE_DISCOVERY_<FIELD>`` variables; empty values are ignored."""
        values: dict[str, Any] = {}
        for f in fields(Config):
            raw = getenv(ENV_PREFIX + f.name.upper())
            if not raw:
                continue
            if f.name == "daemon_timeout":
                try:
                    values[f.name] = float(raw)
                except ValueError:
                    LOGGER.warning("Ignoring invalid %s%s=%r", ENV_PREFIX, f.name.upper(), raw)
                continue
            values[f.name] = raw
        return values

    @staticmethod
    def load(
        filepath: Optional[str] = None,
        getenv: Callable[[str], Optional[str]] = os.environ.get,
        overrides: Optional[dict[str, Any]] = None,
    ) -> Config:
        """Layer defaults, config file, environment and overrides, then finalize.

        Args:
            filepath: Optional YAML/JSON config file; must exist when given
            getenv: Environment lookup (injectable for tests)
            overrides: Values from command-line flags; None entries are skipped

        Returns:
            Finalized Config
        """
        config = Config()
        if filepath:
            if not os.path.exists(filepath):
                raise ConfigError(f"config file not found: {filepath}")
            config.update(load_config_file(filepath))
        config.update(ConfigManager.load_env(getenv))
        if overrides:
            config.update(overrides)
        return config.finalize()
