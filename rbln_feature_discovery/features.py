"""Feature record and its NFD label-file representation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence

from rbln_feature_discovery.hardware.devices import DeviceProduct
from rbln_feature_discovery.hardware.version import DriverVersion

LABEL_PREFIX = "rebellions.ai"

# Label key suffix -> FeatureRecord attribute, in output order
LABEL_FIELDS = (
    ("npu.present", "npu_present"),
    ("npu.count", "npu_count"),
    ("npu.family", "npu_family"),
    ("npu.product", "npu_product"),
    ("driver-version.full", "driver_version_full"),
    ("driver-version.major", "driver_version_major"),
    ("driver-version.minor", "driver_version_minor"),
    ("driver-version.patch", "driver_version_patch"),
    ("driver-version.revision", "driver_version_revision"),
)


@dataclass(frozen=True)
class FeatureRecord:
    """Result of one collection pass.

    Only ``npu_present`` is always set. Device fields (count, family,
    product) are set together; driver fields are independent of them.
    """

    npu_present: bool = False
    npu_count: Optional[int] = None
    npu_family: Optional[str] = None
    npu_product: Optional[str] = None
    driver_version_full: Optional[str] = None
    driver_version_major: Optional[str] = None
    driver_version_minor: Optional[str] = None
    driver_version_patch: Optional[str] = None
    driver_version_revision: Optional[str] = None

    @classmethod
    def from_devices(cls, count: int, product: DeviceProduct) -> "FeatureRecord":
        """Record for ``count`` devices classified by the first device's product."""
        return cls(
            npu_present=True,
            npu_count=count,
            npu_family=product.family().value,
            npu_product=product.feature_string(),
        )

    def with_driver_version(self, version: DriverVersion) -> "FeatureRecord":
        return replace(
            self,
            driver_version_full=version.full,
            driver_version_major=version.major,
            driver_version_minor=version.minor,
            driver_version_patch=version.patch,
            driver_version_revision=version.revision,
        )

    def to_labels(self) -> list[tuple[str, str]]:
        """Return (key, value) label pairs in output order, skipping unset fields."""
        labels = []
        for suffix, attr in LABEL_FIELDS:
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            labels.append((f"{LABEL_PREFIX}/{suffix}", str(value)))
        return labels

    def to_plain_text(self) -> str:
        """Serialize as NFD local feature file body, one ``key=value`` per line."""
        return "".join(f"{key}={value}\n" for key, value in self.to_labels())

    def to_dict(self) -> dict[str, Any]:
        return {attr: getattr(self, attr) for _, attr in LABEL_FIELDS}


def _parse_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"invalid boolean label value: {value}")


def parse_plain_text(text: str | Sequence[str]) -> FeatureRecord:
    """Parse a label file body back into a FeatureRecord.

    Blank lines, comments (including the expiry annotation) and keys outside
    the ``rebellions.ai`` namespace are ignored.

    Raises:
        ValueError: If a known label has a malformed value
    """
    lines = text.splitlines() if isinstance(text, str) else text
    attrs = dict(LABEL_FIELDS)
    values: dict[str, Any] = {}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        namespace, _, suffix = key.partition("/")
        if namespace != LABEL_PREFIX or suffix not in attrs:
            continue
        attr = attrs[suffix]
        if attr == "npu_present":
            values[attr] = _parse_bool(value)
        elif attr == "npu_count":
            values[attr] = int(value)
        else:
            values[attr] = value
    return FeatureRecord(**values)
