"""Tests for driver version parsing."""

import pytest

from rbln_feature_discovery.hardware.version import (
    DriverVersion,
    parse_driver_version,
    parse_version,
    split_semver,
)
from rbln_feature_discovery.utils.errors import VersionParseError


@pytest.mark.parametrize(
    "raw,semver,revision",
    [
        ("1.2.3-rc1", "1.2.3", "rc1"),
        ("1.2.3", "1.2.3", None),
        ("1.2.3+build5", "1.2.3", "build5"),
        ("1.2.3~dev", "1.2.3", "dev"),
        ("1.2.3-rc1+build5", "1.2.3", "rc1+build5"),
        ("1.2.3-", "1.2.3", ""),
        ("  1.2.3-rc1\n", "1.2.3", "rc1"),
    ],
)
def test_parse_version(raw, semver, revision):
    assert parse_version(raw) == (semver, revision)


def test_split_semver():
    assert split_semver("1.2.3") == ("1", "2", "3")


def test_split_semver_ignores_extra_components():
    assert split_semver("1.2.3.4") == ("1", "2", "3")


@pytest.mark.parametrize("semver", ["1.2", "1", ""])
def test_split_semver_requires_three_components(semver):
    with pytest.raises(VersionParseError, match="failed to split semver"):
        split_semver(semver)


def test_parse_driver_version_complete():
    version = parse_driver_version("2.0.1-0a1b2c3")
    assert version == DriverVersion(
        full="2.0.1", revision="0a1b2c3", major="2", minor="0", patch="1"
    )
    assert version.is_complete


def test_parse_driver_version_keeps_full_on_split_failure():
    version = parse_driver_version("2.0-beta")
    assert version.full == "2.0"
    assert version.revision == "beta"
    assert version.major is None
    assert not version.is_complete
