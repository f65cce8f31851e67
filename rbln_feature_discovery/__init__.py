"""RBLN NPU feature discovery for Kubernetes node-feature-discovery."""

__version__ = "0.1.0"

from .discovery import FeaturesCollector, render_label_file, write_atomic
from .features import FeatureRecord, parse_plain_text
from .hardware import DeviceFamily, DeviceProduct, family_of, product_from_device_id
from .utils.errors import FeatureDiscoveryError

__all__ = [
    "__version__",
    "DeviceFamily",
    "DeviceProduct",
    "FeatureDiscoveryError",
    "FeatureRecord",
    "FeaturesCollector",
    "family_of",
    "parse_plain_text",
    "product_from_device_id",
    "render_label_file",
    "write_atomic",
]
