"""Command-line interface for rbln-npu-feature-discovery."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from rbln_feature_discovery import __version__
from rbln_feature_discovery.configs import ConfigManager
from rbln_feature_discovery.discovery import FeaturesCollector, render_label_file
from rbln_feature_discovery.features import parse_plain_text
from rbln_feature_discovery.utils.errors import FeatureDiscoveryError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

LOGGER = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Setup command-line argument parser.

    Returns:
        ArgumentParser configured for rbln-npu-feature-discovery
    """
    parser = argparse.ArgumentParser(
        prog="rbln-npu-feature-discovery",
        description="Generate RBLN NPU labels for node-feature-discovery",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Collect once and write the NFD feature file
  rbln-npu-feature-discovery
  rbln-npu-feature-discovery --rbln-daemon-url 10.0.0.5:50051 -o /tmp/rbln-features

  # Print labels instead of writing them
  rbln-npu-feature-discovery collect --print --no-timestamp

  # Show a published feature file
  rbln-npu-feature-discovery show /etc/kubernetes/node-feature-discovery/features.d/rbln-features

Environment Variables:
  RBLN_NPU_FEATURE_DISCOVERY_RBLN_DAEMON_URL   Daemon endpoint
  RBLN_NPU_FEATURE_DISCOVERY_OUTPUT_FILE       Output file path
  RBLN_NPU_FEATURE_DISCOVERY_NO_TIMESTAMP      Skip expiry annotation (true/false)
  RBLN_NPU_FEATURE_DISCOVERY_DAEMON_TIMEOUT    Daemon timeout in seconds
  RBLN_NPU_FEATURE_DISCOVERY_LOG_LEVEL         Logging level
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to configuration file (YAML/JSON)")
    parser.add_argument("--rbln-daemon-url", help="Endpoint of the RBLN daemon gRPC server")
    parser.add_argument("-o", "--output-file", help="Path to output file")
    parser.add_argument(
        "--no-timestamp",
        action="store_true",
        default=None,
        help="Skip writing expiry timestamp to labels",
    )
    parser.add_argument(
        "--daemon-timeout",
        type=float,
        metavar="SECONDS",
        help="Timeout for connecting to the daemon and for each RPC (default: 10)",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")

    subparsers = parser.add_subparsers(dest="command")

    collect = subparsers.add_parser("collect", help="Collect features once (default)")
    collect.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print labels to stdout instead of writing the output file",
    )

    show = subparsers.add_parser("show", help="Show the fields of a feature file")
    show.add_argument("path", nargs="?", help="Feature file (default: configured output file)")

    return parser


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "rbln_daemon_url": args.rbln_daemon_url,
        "output_file": args.output_file,
        "no_timestamp": args.no_timestamp,
        "daemon_timeout": args.daemon_timeout,
        "log_level": args.log_level,
    }


def run_collect(args: argparse.Namespace, config) -> int:
    collector = FeaturesCollector(config)
    if getattr(args, "print_only", False):
        record = collector.collect()
        sys.stdout.write(render_label_file(record, config.no_timestamp))
        return 0
    collector.collect_once()
    return 0


def run_show(args: argparse.Namespace, config) -> int:
    path = args.path or config.output_file
    with open(path, encoding="utf-8") as f:
        record = parse_plain_text(f.read())
    for key, value in record.to_dict().items():
        if value is not None:
            print(f"{key}: {value}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigManager.load(args.config, overrides=_overrides(args))
    except FeatureDiscoveryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    LOGGER.debug("Starting rbln-npu-feature-discovery with config %s", config.to_dict())

    try:
        if args.command == "show":
            return run_show(args, config)
        return run_collect(args, config)
    except (FeatureDiscoveryError, OSError, ValueError) as e:
        LOGGER.error("Feature discovery failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
