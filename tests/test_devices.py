"""Tests for the RBLN device taxonomy."""

import pytest

from rbln_feature_discovery.hardware import devices as devices_mod
from rbln_feature_discovery.hardware.devices import (
    DEVICE_PRODUCT_TABLE,
    DeviceFamily,
    DeviceProduct,
    family_of,
    product_from_device_id,
)
from rbln_feature_discovery.utils.errors import (
    TaxonomyError,
    UnknownDeviceError,
    UnknownProductError,
)


@pytest.mark.parametrize(
    "device_id,product",
    [
        ("1020", DeviceProduct.CA02),
        ("1021", DeviceProduct.CA02),
        ("1120", DeviceProduct.CA12),
        ("1121", DeviceProduct.CA02),
        ("1150", DeviceProduct.CA15),
        ("1220", DeviceProduct.CA22),
        ("1221", DeviceProduct.CA22),
        ("1250", DeviceProduct.CA25),
    ],
)
def test_product_from_known_device_id(device_id, product):
    assert product_from_device_id(device_id) is product
    assert family_of(product) is DeviceFamily.ATOM


def test_table_covers_every_product():
    assert set(DEVICE_PRODUCT_TABLE.values()) == set(DeviceProduct)


@pytest.mark.parametrize("device_id", ["", "0x1120", "9999", "1120\n", "abcd"])
def test_unknown_device_id_raises(device_id):
    with pytest.raises(UnknownDeviceError, match="unknown device id"):
        product_from_device_id(device_id)


def test_unknown_device_error_is_taxonomy_error():
    with pytest.raises(TaxonomyError):
        product_from_device_id("0000")


def test_feature_string_and_family_method():
    assert DeviceProduct.CA12.feature_string() == "RBLN-CA12"
    assert DeviceProduct.CA25.family() is DeviceFamily.ATOM


def test_rebel_prefix_maps_to_rebel():
    fake = type("FakeProduct", (), {"value": "CR03"})()
    assert family_of(fake) is DeviceFamily.REBEL


def test_family_of_unknown_prefix_raises(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(devices_mod, "FAMILY_PREFIXES", {"CR": DeviceFamily.REBEL})
    with pytest.raises(UnknownProductError, match="unknown product name: CA12"):
        family_of(DeviceProduct.CA12)
