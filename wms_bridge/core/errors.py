"""
core/errors.py
---------------

Error taxonomy of the WMS request executor.

Three failure classes are distinguished because the executor treats
them differently: HTTP error responses are retried over the attempt
schedule, transport failures and undecodable payloads are raised on
first occurrence. None of them is logged or translated here; the HTTP
layer in :mod:`wms_bridge.main` maps them to responses.
"""

from __future__ import annotations

from typing import Optional


class WmsError(Exception):
    """Base class for every failure raised by the WMS executor."""

    def __init__(self, method: str, path: str, message: str) -> None:
        self.method = method.upper()
        self.path = path
        super().__init__(f"{self.method} {path}: {message}")


class TransientUpstreamError(WmsError):
    """The WMS answered with an HTTP error status (401, 5xx, ...)."""

    def __init__(self, method: str, path: str, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(method, path, f"upstream responded with HTTP {status_code}")


class TransportError(WmsError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""

    def __init__(self, method: str, path: str, detail: str) -> None:
        self.detail = detail
        super().__init__(method, path, f"transport failure: {detail}")


class DecodeError(WmsError):
    """The WMS answered successfully but the body is not valid JSON."""

    def __init__(self, method: str, path: str, body: bytes, reason: Optional[str] = None) -> None:
        self.body = body
        super().__init__(method, path, f"malformed JSON payload ({reason or 'undecodable body'})")
