"""gRPC client for the RBLN daemon.

Wraps the two RPCs feature discovery needs and translates gRPC failures into
DaemonError / DaemonUnavailableError so callers never handle grpc types.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import grpc

from rbln_feature_discovery.daemon import messages
from rbln_feature_discovery.utils.errors import DaemonError, DaemonUnavailableError

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

_UNAVAILABLE_CODES = (grpc.StatusCode.UNIMPLEMENTED, grpc.StatusCode.UNAVAILABLE)


def _translate_rpc_error(rpc_name: str, error: grpc.RpcError) -> DaemonError:
    code = error.code() if hasattr(error, "code") else None
    details = error.details() if hasattr(error, "details") else str(error)
    if code == grpc.StatusCode.UNIMPLEMENTED:
        return DaemonUnavailableError(f"{rpc_name} is not implemented")
    if code in _UNAVAILABLE_CODES:
        return DaemonUnavailableError(f"{rpc_name} failed: daemon unavailable ({details})")
    return DaemonError(f"{rpc_name} failed: {code}: {details}")


class DaemonClient:
    """Synchronous client for ``rblnservices.RBLNServices``.

    Use as a context manager; the channel is opened by connect() and closed on exit.

    Args:
        endpoint: ``host:port`` of the daemon (scheme already stripped)
        timeout: Seconds to wait for the channel and for each RPC
        channel: Pre-built channel; skips dialing (used by tests)
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        channel: Optional[Any] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._channel = channel
        self._owns_channel = channel is None

    def connect(self) -> "DaemonClient":
        if self._channel is not None:
            return self
        channel = grpc.insecure_channel(self.endpoint)
        try:
            grpc.channel_ready_future(channel).result(timeout=self.timeout)
        except grpc.FutureTimeoutError as e:
            channel.close()
            raise DaemonUnavailableError(
                f"failed to dial rbln-daemon {self.endpoint} within {self.timeout}s"
            ) from e
        self._channel = channel
        return self

    def close(self) -> None:
        if self._channel is not None and self._owns_channel:
            self._channel.close()
        self._channel = None

    def __enter__(self) -> "DaemonClient":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _require_channel(self):
        if self._channel is None:
            raise DaemonUnavailableError("daemon client is not connected")
        return self._channel

    def serviceable_devices(self) -> List[Any]:
        """Call GetServiceableDeviceList and drain the response stream."""
        channel = self._require_channel()
        rpc = channel.unary_stream(
            messages.GET_SERVICEABLE_DEVICE_LIST,
            request_serializer=messages.Empty.SerializeToString,
            response_deserializer=messages.Device.FromString,
        )
        try:
            return list(rpc(messages.Empty(), timeout=self.timeout))
        except grpc.RpcError as e:
            raise _translate_rpc_error("GetServiceableDeviceList", e) from e

    def version(self, device: Any) -> Any:
        """Call GetVersion for ``device`` and return the VersionInfo message."""
        channel = self._require_channel()
        rpc = channel.unary_unary(
            messages.GET_VERSION,
            request_serializer=messages.Device.SerializeToString,
            response_deserializer=messages.VersionInfo.FromString,
        )
        try:
            return rpc(device, timeout=self.timeout)
        except grpc.RpcError as e:
            raise _translate_rpc_error("GetVersion", e) from e
