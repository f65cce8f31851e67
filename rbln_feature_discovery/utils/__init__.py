"""Shared utilities for rbln_feature_discovery."""

from .errors import (
    ConfigError,
    DaemonError,
    DaemonUnavailableError,
    FeatureDiscoveryError,
    SysfsError,
    TaxonomyError,
    UnknownDeviceError,
    UnknownProductError,
    VersionParseError,
)

__all__ = [
    "ConfigError",
    "DaemonError",
    "DaemonUnavailableError",
    "FeatureDiscoveryError",
    "SysfsError",
    "TaxonomyError",
    "UnknownDeviceError",
    "UnknownProductError",
    "VersionParseError",
]
