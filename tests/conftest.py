"""Pytest configuration and fixtures."""

from pathlib import Path
from types import SimpleNamespace

import pytest

from rbln_feature_discovery.hardware.sysfs import SysfsLayout
from rbln_feature_discovery.utils.errors import DaemonUnavailableError


class FakeSysfs:
    """Builds a fake /sys tree under a temporary root."""

    def __init__(self, root: Path):
        self.root = root
        self.layout = SysfsLayout.under_root(root)
        self.layout.pci_devices_path.mkdir(parents=True)

    def add_pci_device(self, address, vendor="0x1eff", device="0x1120", sriov_numvfs=None):
        path = self.layout.pci_devices_path / address
        path.mkdir()
        (path / "vendor").write_text(vendor + "\n")
        if device is not None:
            (path / "device").write_text(device + "\n")
        if sriov_numvfs is not None:
            (path / "sriov_numvfs").write_text(f"{sriov_numvfs}\n")
        return path

    def set_driver_version(self, version, device="rbln0"):
        device_dir = self.layout.class_path / device
        device_dir.mkdir(parents=True, exist_ok=True)
        if version is not None:
            (device_dir / "kernel_version").write_text(version + "\n")
        return device_dir


class FakeDaemonClient:
    """In-memory stand-in for DaemonClient."""

    def __init__(self, device_ids=(), version="1.2.3", devices_error=None, version_error=None):
        self.devices = [SimpleNamespace(dev_id=d) for d in device_ids]
        self.drv_version = version
        self.devices_error = devices_error
        self.version_error = version_error
        self.connected = False
        self.closed = False
        self.version_requests = []

    def __enter__(self):
        self.connected = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def serviceable_devices(self):
        if self.devices_error is not None:
            raise self.devices_error
        return list(self.devices)

    def version(self, device):
        self.version_requests.append(device)
        if self.version_error is not None:
            raise self.version_error
        return SimpleNamespace(drv_version=self.drv_version)


class UnreachableDaemonClient(FakeDaemonClient):
    """Client whose connection attempt fails."""

    def __enter__(self):
        raise DaemonUnavailableError("failed to dial rbln-daemon")


@pytest.fixture
def fake_sysfs(tmp_path):
    """Empty fake sysfs tree with a PCI devices directory."""
    return FakeSysfs(tmp_path / "root")


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "features.d"
    path.mkdir()
    return path
