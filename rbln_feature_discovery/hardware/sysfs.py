"""Sysfs access for RBLN devices.

Discovers RBLN NPUs by walking the PCI device tree and reads the driver
version exported by the rebellions kernel module. All paths come from a
SysfsLayout so tests can point the walk at a fake tree.
"""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import List, Optional

from rbln_feature_discovery.utils.errors import SysfsError

LOGGER = logging.getLogger(__name__)

RBLN_VENDOR_ID = "0x1eff"
PCI_DEVICES_PATH = "/sys/bus/pci/devices"
REBELLIONS_CLASS_PATH = "/sys/class/rebellions"
FIRST_DEVICE_NAME = "rbln0"
KERNEL_VERSION_KEY = "kernel_version"


@dataclass(frozen=True)
class SysfsLayout:
    """Filesystem locations and vendor filter used for discovery.

    Attributes:
        pci_devices_path: Directory holding one entry per PCI function
        class_path: Driver class directory created by the rebellions module
        vendor_id: PCI vendor id of RBLN devices as found in ``vendor`` files
        first_device: Name of the first device directory under class_path
        kernel_version_key: Attribute file holding the driver version
    """

    pci_devices_path: Path = Path(PCI_DEVICES_PATH)
    class_path: Path = Path(REBELLIONS_CLASS_PATH)
    vendor_id: str = RBLN_VENDOR_ID
    first_device: str = FIRST_DEVICE_NAME
    kernel_version_key: str = KERNEL_VERSION_KEY

    @classmethod
    def under_root(cls, root) -> "SysfsLayout":
        """Build a layout rooted at ``root`` instead of ``/`` (for tests and chroots)."""
        root = Path(root)
        return cls(
            pci_devices_path=root / PCI_DEVICES_PATH.lstrip("/"),
            class_path=root / REBELLIONS_CLASS_PATH.lstrip("/"),
        )


@dataclass(frozen=True)
class PciDevice:
    """An RBLN PCI function eligible for direct use."""

    address: str
    device_id: str


def _read_attr(path: Path) -> str:
    return path.read_text(encoding="utf-8").strip()


def _sriov_enabled(device_path: Path) -> bool:
    """True if the entry is a PF with virtual functions enabled."""
    numvfs_path = device_path / "sriov_numvfs"
    try:
        raw = _read_attr(numvfs_path)
    except OSError:
        return False
    try:
        return int(raw) != 0
    except ValueError:
        LOGGER.debug("Ignoring unparseable %s: %r", numvfs_path, raw)
        return False


def discover_devices(layout: Optional[SysfsLayout] = None) -> List[PciDevice]:
    """List RBLN PCI functions, skipping physical functions with SR-IOV enabled.

    Entries are visited in name (PCI address) order.

    Raises:
        SysfsError: If the PCI tree or a required attribute cannot be read
    """
    layout = layout or SysfsLayout()
    try:
        entries = sorted(layout.pci_devices_path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SysfsError(f"failed to read {layout.pci_devices_path}: {e}") from e

    devices: List[PciDevice] = []
    for device_path in entries:
        try:
            vendor = _read_attr(device_path / "vendor")
        except OSError as e:
            raise SysfsError(f"failed to read vendor of {device_path.name}: {e}") from e
        if vendor != layout.vendor_id:
            continue

        if _sriov_enabled(device_path):
            LOGGER.debug("Skipping %s: SR-IOV enabled", device_path.name)
            continue

        try:
            device_id = _read_attr(device_path / "device")
        except OSError as e:
            raise SysfsError(f"failed to read device id of {device_path.name}: {e}") from e
        device_id = device_id.removeprefix("0x")
        devices.append(PciDevice(address=device_path.name, device_id=device_id))

    return devices


def read_driver_version(layout: Optional[SysfsLayout] = None) -> Optional[str]:
    """Read the raw driver version from sysfs.

    Returns None when the driver is not loaded or the attribute is missing;
    devices can be present without a driver, so none of these are errors.
    """
    layout = layout or SysfsLayout()
    if not layout.class_path.exists():
        LOGGER.debug("%s not found, driver not installed", layout.class_path)
        return None

    device_dir = layout.class_path / layout.first_device
    if not device_dir.exists():
        LOGGER.error("sysfs for device %s not found", layout.first_device)
        return None

    version_file = device_dir / layout.kernel_version_key
    if not version_file.exists():
        LOGGER.error("%s file not found in sysfs", layout.kernel_version_key)
        return None

    try:
        return _read_attr(version_file)
    except OSError as e:
        LOGGER.error("Failed to read %s: %s", version_file, e)
        return None
