"""Tests for FeatureRecord serialization."""

import pytest

from rbln_feature_discovery.features import FeatureRecord, parse_plain_text
from rbln_feature_discovery.hardware.devices import DeviceProduct
from rbln_feature_discovery.hardware.version import parse_driver_version

FULL_RECORD = FeatureRecord(
    npu_present=True,
    npu_count=4,
    npu_family="ATOM",
    npu_product="RBLN-CA12",
    driver_version_full="1.2.3",
    driver_version_major="1",
    driver_version_minor="2",
    driver_version_patch="3",
    driver_version_revision="rc1",
)


def test_full_record_field_order():
    assert FULL_RECORD.to_plain_text() == (
        "rebellions.ai/npu.present=true\n"
        "rebellions.ai/npu.count=4\n"
        "rebellions.ai/npu.family=ATOM\n"
        "rebellions.ai/npu.product=RBLN-CA12\n"
        "rebellions.ai/driver-version.full=1.2.3\n"
        "rebellions.ai/driver-version.major=1\n"
        "rebellions.ai/driver-version.minor=2\n"
        "rebellions.ai/driver-version.patch=3\n"
        "rebellions.ai/driver-version.revision=rc1\n"
    )


def test_empty_record_emits_presence_only():
    assert FeatureRecord().to_plain_text() == "rebellions.ai/npu.present=false\n"


def test_round_trip_recovers_every_field():
    assert parse_plain_text(FULL_RECORD.to_plain_text()) == FULL_RECORD


def test_parse_ignores_comments_and_foreign_keys():
    text = (
        "# +expiry-time=2026-10-18T10:00:00+00:00\n"
        "\n"
        "feature.node.kubernetes.io/other=1\n"
        "rebellions.ai/npu.present=false\n"
        "rebellions.ai/unknown.key=x\n"
    )
    assert parse_plain_text(text) == FeatureRecord(npu_present=False)


def test_parse_rejects_bad_boolean():
    with pytest.raises(ValueError):
        parse_plain_text("rebellions.ai/npu.present=maybe\n")


def test_from_devices_and_driver_version():
    record = FeatureRecord.from_devices(3, DeviceProduct.CA22).with_driver_version(
        parse_driver_version("1.0.0~beta")
    )
    assert record.npu_family == "ATOM"
    assert record.npu_product == "RBLN-CA22"
    assert record.driver_version_revision == "beta"
    assert record.driver_version_major == "1"


def test_record_is_immutable():
    with pytest.raises(AttributeError):
        FULL_RECORD.npu_count = 1
