"""Feature collection through the RBLN daemon."""

import logging
from typing import Any

from rbln_feature_discovery.collectors.base import FeatureCollectorBase
from rbln_feature_discovery.features import FeatureRecord
from rbln_feature_discovery.hardware.devices import product_from_device_id
from rbln_feature_discovery.utils.errors import DaemonError, DaemonUnavailableError

LOGGER = logging.getLogger(__name__)


class DaemonCollector(FeatureCollectorBase):
    """Collect NPU and driver features from a connected daemon client.

    Args:
        client: Object exposing ``serviceable_devices()`` and ``version(device)``,
            normally a connected DaemonClient
    """

    def __init__(self, client: Any):
        super().__init__("daemon")
        self.client = client

    def collect(self) -> FeatureRecord:
        try:
            devices = self.client.serviceable_devices()
        except DaemonUnavailableError as e:
            LOGGER.debug("%s", e)
            raise
        except DaemonError as e:
            LOGGER.error("Internal error in GetServiceableDeviceList: %s", e)
            raise

        if not devices:
            return FeatureRecord(npu_present=False)

        # Heterogeneous products on one host are not modeled: the first device wins
        first_device = devices[0]
        product = product_from_device_id(first_device.dev_id)
        record = FeatureRecord.from_devices(len(devices), product)

        try:
            version_info = self.client.version(first_device)
        except DaemonError as e:
            LOGGER.debug("Failed to fetch driver version from daemon: %s", e)
            return record

        return self._apply_driver_version(record, version_info.drv_version)
