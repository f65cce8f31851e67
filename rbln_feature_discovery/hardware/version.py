"""Driver version string parsing.

Driver versions look like ``1.2.3``, ``1.2.3-rc1``, ``1.2.3+build5`` or
``1.2.3~dev``. The part before the first delimiter is the semantic version;
whatever follows is kept verbatim as the revision.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from rbln_feature_discovery.utils.errors import VersionParseError

REVISION_DELIMITERS = "-+~"


@dataclass(frozen=True)
class DriverVersion:
    """Parsed driver version.

    Attributes:
        full: Semantic version part (e.g. "1.2.3")
        revision: Suffix after the first delimiter, if any
        major: Major component, unset when the semver could not be split
        minor: Minor component
        patch: Patch component
    """

    full: str
    revision: Optional[str] = None
    major: Optional[str] = None
    minor: Optional[str] = None
    patch: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.major is not None and self.minor is not None and self.patch is not None


def parse_version(raw: str) -> Tuple[str, Optional[str]]:
    """Split a raw driver version into (semver, revision).

    Examples:
        >>> parse_version("1.2.3-rc1")
        ('1.2.3', 'rc1')
        >>> parse_version("1.2.3")
        ('1.2.3', None)
    """
    raw = raw.strip()
    for index, char in enumerate(raw):
        if char in REVISION_DELIMITERS:
            return raw[:index], raw[index + 1 :]
    return raw, None


def split_semver(semver: str) -> Tuple[str, str, str]:
    """Split a semantic version into (major, minor, patch).

    Components beyond the third are ignored.

    Raises:
        VersionParseError: If fewer than three dot-separated components exist
    """
    parts = semver.split(".")
    if len(parts) < 3:
        raise VersionParseError(f"failed to split semver with dots: {semver}")
    return parts[0], parts[1], parts[2]


def parse_driver_version(raw: str) -> DriverVersion:
    """Parse a raw driver version, leaving major/minor/patch unset on split failure.

    Callers decide how loudly to report an incomplete result; check
    ``DriverVersion.is_complete``.
    """
    semver, revision = parse_version(raw)
    try:
        major, minor, patch = split_semver(semver)
    except VersionParseError:
        return DriverVersion(full=semver, revision=revision)
    return DriverVersion(full=semver, revision=revision, major=major, minor=minor, patch=patch)
