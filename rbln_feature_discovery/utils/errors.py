"""Custom exceptions for RBLN NPU feature discovery.

Collectors raise these so the aggregator can tell an unusable source
(fall back) from a broken host (propagate) without inspecting messages.
"""


class FeatureDiscoveryError(Exception):
    """Base exception for all feature discovery errors."""

    pass


class TaxonomyError(FeatureDiscoveryError):
    """Raised when a hardware identifier cannot be classified."""

    pass


class UnknownDeviceError(TaxonomyError):
    """Raised when a PCI device id is not in the product table."""

    pass


class UnknownProductError(TaxonomyError):
    """Raised when a product name matches no known family prefix."""

    pass


class VersionParseError(FeatureDiscoveryError):
    """Raised when a driver version string cannot be split into major/minor/patch."""

    pass


class SysfsError(FeatureDiscoveryError):
    """Raised when the PCI device tree cannot be enumerated or read."""

    pass


class DaemonError(FeatureDiscoveryError):
    """Raised when the RBLN daemon returns an error for a discovery RPC."""

    pass


class DaemonUnavailableError(DaemonError):
    """Raised when the RBLN daemon cannot be reached or does not implement the RPC."""

    pass


class ConfigError(FeatureDiscoveryError):
    """Raised when configuration is invalid or a config file cannot be loaded."""

    pass
