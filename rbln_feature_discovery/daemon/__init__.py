"""Client for the on-host RBLN management daemon."""

from .client import DEFAULT_TIMEOUT_SECONDS, DaemonClient

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "DaemonClient"]
