"""Feature sources: the RBLN daemon and sysfs."""

from .base import FeatureCollectorBase
from .daemon_collector import DaemonCollector
from .sysfs_collector import SysfsCollector

__all__ = ["FeatureCollectorBase", "DaemonCollector", "SysfsCollector"]
