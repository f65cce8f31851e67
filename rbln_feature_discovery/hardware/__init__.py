"""Hardware taxonomy, sysfs discovery and driver version parsing."""

from .devices import (
    DEVICE_PRODUCT_TABLE,
    DeviceFamily,
    DeviceProduct,
    family_of,
    product_from_device_id,
)
from .sysfs import PciDevice, SysfsLayout, discover_devices, read_driver_version
from .version import DriverVersion, parse_driver_version, parse_version, split_semver

__all__ = [
    "DEVICE_PRODUCT_TABLE",
    "DeviceFamily",
    "DeviceProduct",
    "family_of",
    "product_from_device_id",
    "PciDevice",
    "SysfsLayout",
    "discover_devices",
    "read_driver_version",
    "DriverVersion",
    "parse_driver_version",
    "parse_version",
    "split_semver",
]
