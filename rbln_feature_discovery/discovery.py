"""One-shot NPU feature discovery.

FeaturesCollector asks the RBLN daemon first and falls back to sysfs when
the daemon cannot be used. Exactly one source's record is published; a
failed daemon attempt contributes nothing to the fallback result.

The label file follows the NFD local feature source contract: written to a
hidden temp file in the same directory, then renamed over the target.
"""

from __future__ import annotations

from datetime import datetime, timedelta
import logging
import os
from typing import Any, Callable, Optional

from rbln_feature_discovery.collectors import DaemonCollector, SysfsCollector
from rbln_feature_discovery.configs import Config
from rbln_feature_discovery.daemon import DaemonClient
from rbln_feature_discovery.features import FeatureRecord
from rbln_feature_discovery.hardware.sysfs import SysfsLayout
from rbln_feature_discovery.utils.errors import DaemonError, TaxonomyError

LOGGER = logging.getLogger(__name__)

EXPIRY_PERIOD = timedelta(hours=1)
EXPIRY_COMMENT_PREFIX = "# +expiry-time="


def expiry_annotation(now: Optional[datetime] = None) -> str:
    """Return the expiry comment line for labels published at ``now`` (local time)."""
    # Naive datetimes are local time
    now = (now or datetime.now()).astimezone()
    expiry = (now + EXPIRY_PERIOD).isoformat(timespec="seconds")
    return f"{EXPIRY_COMMENT_PREFIX}{expiry}\n"


def render_label_file(
    record: FeatureRecord,
    no_timestamp: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """Serialize a record, prefixed with the expiry annotation unless disabled."""
    text = record.to_plain_text()
    if not no_timestamp:
        text = expiry_annotation(now) + text
    return text


def write_atomic(path: str, text: str) -> bool:
    """Publish ``text`` at ``path`` via a hidden temp file and rename.

    Returns:
        True if written; False when the parent directory is missing or the
        text is empty (nothing to publish)
    """
    directory = os.path.dirname(path) or "."
    if not os.path.isdir(directory):
        LOGGER.debug("Output directory %s does not exist, skipping write", directory)
        return False
    if not text:
        LOGGER.debug("Nothing to write to %s", path)
        return False

    temp_path = os.path.join(directory, "." + os.path.basename(path))
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(temp_path, path)
    except OSError:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
    return True


class FeaturesCollector:
    """Runs one daemon-or-sysfs collection pass and saves the labels.

    Args:
        config: Finalized Config
        layout: Sysfs layout for the fallback path
        client_factory: Builds the daemon client from (endpoint, timeout);
            defaults to DaemonClient
    """

    def __init__(
        self,
        config: Config,
        layout: Optional[SysfsLayout] = None,
        client_factory: Optional[Callable[[str, float], Any]] = None,
    ):
        self.config = config
        self.layout = layout or SysfsLayout()
        self.client_factory = client_factory or DaemonClient

    def collect_from_daemon(self) -> FeatureRecord:
        """Connect to the daemon and collect; the channel is closed on return."""
        client = self.client_factory(self.config.rbln_daemon_url, self.config.daemon_timeout)
        with client:
            return DaemonCollector(client).collect()

    def collect_from_sysfs(self) -> FeatureRecord:
        return SysfsCollector(self.layout).collect()

    def collect(self) -> FeatureRecord:
        """Collect features, preferring the daemon.

        Raises:
            FeatureDiscoveryError: If the sysfs fallback also fails
        """
        try:
            record = self.collect_from_daemon()
            LOGGER.debug("Collected features from daemon at %s", self.config.rbln_daemon_url)
            return record
        except (DaemonError, TaxonomyError) as e:
            LOGGER.debug(
                "Failed to collect features from daemon, falling back to sysfs: %s", e
            )
        return self.collect_from_sysfs()

    def save(self, record: FeatureRecord, now: Optional[datetime] = None) -> bool:
        text = render_label_file(record, self.config.no_timestamp, now)
        LOGGER.debug("Collected features:\n%s", text)
        written = write_atomic(self.config.output_file, text)
        if written:
            LOGGER.info("Features saved to %s", self.config.output_file)
        return written

    def collect_once(self) -> FeatureRecord:
        """Collect and save; returns the published record."""
        record = self.collect()
        self.save(record)
        return record
