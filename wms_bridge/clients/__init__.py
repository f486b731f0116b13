"""Outbound clients for the WMS HTTP API."""

from wms_bridge.clients.http_client import RETRY_DELAYS, RetryingRequestExecutor
from wms_bridge.clients.wms_client import WmsClient

__all__ = ["RETRY_DELAYS", "RetryingRequestExecutor", "WmsClient"]
