"""Base collector interface for feature discovery.

A collector produces one FeatureRecord per call to collect(). Collectors
never share state: each call builds a fresh record or raises, and the
caller picks which record to publish.

Example usage:
    class MyCollector(FeatureCollectorBase):
        def collect(self):
            return FeatureRecord(npu_present=False)
"""

from abc import ABC, abstractmethod
import logging

from rbln_feature_discovery.features import FeatureRecord
from rbln_feature_discovery.hardware.version import parse_driver_version

LOGGER = logging.getLogger(__name__)


class FeatureCollectorBase(ABC):
    """Abstract base class for feature sources.

    Attributes:
        name: Human-readable name used in log messages
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def collect(self) -> FeatureRecord:
        """Run one collection pass.

        Raises:
            FeatureDiscoveryError: If the source cannot determine device presence
        """
        pass

    def _apply_driver_version(self, record: FeatureRecord, raw_version: str) -> FeatureRecord:
        """Add driver-version fields; an unsplittable semver only loses major/minor/patch.

        A blank version means no driver version could be determined, so the
        record is returned without any driver fields.
        """
        version = parse_driver_version(raw_version)
        if not version.full:
            LOGGER.error("%s: empty driver version %r, skipping driver labels", self.name, raw_version)
            return record
        if not version.is_complete:
            LOGGER.error(
                "%s: failed to split semver with dots: %s", self.name, version.full
            )
        return record.with_driver_version(version)


__all__ = ["FeatureCollectorBase"]
