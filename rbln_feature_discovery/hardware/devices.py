"""RBLN device taxonomy.

Maps the PCI device id reported by sysfs or the RBLN daemon to a product
(e.g. CA12) and derives the product family (ATOM, REBEL) from the product
name prefix. Pure lookups; no I/O.
"""

from enum import Enum
from typing import Dict

from rbln_feature_discovery.utils.errors import UnknownDeviceError, UnknownProductError

# Label value prefix for products (e.g. "RBLN-CA12")
PRODUCT_LABEL_PREFIX = "RBLN"


class DeviceFamily(Enum):
    """Coarse architecture grouping of RBLN products."""

    ATOM = "ATOM"
    REBEL = "REBEL"


class DeviceProduct(Enum):
    """Known RBLN NPU products."""

    CA02 = "CA02"
    CA12 = "CA12"
    CA15 = "CA15"
    CA22 = "CA22"
    CA25 = "CA25"

    def feature_string(self) -> str:
        """Return the product label value, e.g. ``RBLN-CA12``."""
        return f"{PRODUCT_LABEL_PREFIX}-{self.value}"

    def family(self) -> DeviceFamily:
        return family_of(self)


# Product name prefix -> family
FAMILY_PREFIXES: Dict[str, DeviceFamily] = {
    "CA": DeviceFamily.ATOM,
    "CR": DeviceFamily.REBEL,
}

# PCI device id (hex, no 0x prefix) -> product
DEVICE_PRODUCT_TABLE: Dict[str, DeviceProduct] = {
    "1020": DeviceProduct.CA02,
    "1021": DeviceProduct.CA02,  # SR-IOV
    "1120": DeviceProduct.CA12,
    "1121": DeviceProduct.CA02,  # SR-IOV
    "1150": DeviceProduct.CA15,
    "1220": DeviceProduct.CA22,
    "1221": DeviceProduct.CA22,  # SR-IOV
    "1250": DeviceProduct.CA25,
}


def product_from_device_id(device_id: str) -> DeviceProduct:
    """Resolve a PCI device id to a product.

    Args:
        device_id: Device id as a hex string without ``0x`` (e.g. "1120")

    Returns:
        The matching DeviceProduct

    Raises:
        UnknownDeviceError: If the id is not a known RBLN device
    """
    try:
        return DEVICE_PRODUCT_TABLE[device_id]
    except KeyError:
        raise UnknownDeviceError(f"unknown device id: {device_id}") from None


def family_of(product: DeviceProduct) -> DeviceFamily:
    """Derive the family of a product from its name prefix.

    Raises:
        UnknownProductError: If the product name has no known family prefix
    """
    name = product.value
    for prefix, family in FAMILY_PREFIXES.items():
        if name.startswith(prefix):
            return family
    raise UnknownProductError(f"unknown product name: {name}")
