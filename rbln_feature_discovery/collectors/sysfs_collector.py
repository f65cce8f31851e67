"""Feature collection straight from sysfs.

Used when the RBLN daemon is not reachable. Device discovery errors
propagate; the driver version is best-effort.
"""

import logging
from typing import Optional

from rbln_feature_discovery.collectors.base import FeatureCollectorBase
from rbln_feature_discovery.features import FeatureRecord
from rbln_feature_discovery.hardware.devices import product_from_device_id
from rbln_feature_discovery.hardware.sysfs import (
    SysfsLayout,
    discover_devices,
    read_driver_version,
)

LOGGER = logging.getLogger(__name__)


class SysfsCollector(FeatureCollectorBase):
    """Collect NPU and driver features from the PCI tree and the rebellions class dir."""

    def __init__(self, layout: Optional[SysfsLayout] = None):
        super().__init__("sysfs")
        self.layout = layout or SysfsLayout()

    def collect(self) -> FeatureRecord:
        devices = discover_devices(self.layout)
        # Every device id must be known, not only the first one
        products = [product_from_device_id(d.device_id) for d in devices]

        record = FeatureRecord(npu_present=False)
        if products:
            # Heterogeneous products on one host are not modeled: the first device wins
            record = FeatureRecord.from_devices(len(products), products[0])
        LOGGER.debug("sysfs: found %d RBLN device(s)", len(products))

        raw_version = read_driver_version(self.layout)
        if raw_version is None:
            return record
        return self._apply_driver_version(record, raw_version)
