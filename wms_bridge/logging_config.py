"""
logging_config.py
------------------

Shared logging configuration for the WMS bridge.

Python's built‑in ``logging`` module is configured once here and every
module imports ``logger`` from this file. Messages are serialised as
JSON strings with an ``event`` key so they can be parsed downstream.

``log_call`` records entry and exit of route handlers at DEBUG level
and ``log_http_request`` records outbound WMS attempts. Both pass
their payloads through ``_sanitize`` so that credentials and encoded
file contents never reach the log output.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

from pydantic import BaseModel

# -----------------------------------------------------------------------------
# Configure global logging
# -----------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger("wms_bridge")

# Keys dropped when they contain one of these words.
_SENSITIVE_KEYS = ("token", "password", "secret")
# Keys dropped only on an exact match, so "author" or "authorized" survive.
_AUTH_KEYS = ("auth", "authorization")
# Keys whose values are base64 file contents; only the size is logged.
_BLOB_KEYS = ("file",)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionary keys containing 'token', 'password' or 'secret' are
    removed, as are keys named exactly 'auth' or 'authorization'.
    Encoded file contents and byte strings are replaced by a size
    marker, and lists and tuples are processed element‑wise.
    Pydantic models are dumped first. Anything that still cannot be
    serialised is represented by its ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            key = str(k).lower()
            if key in _AUTH_KEYS or any(keyword in key for keyword in _SENSITIVE_KEYS):
                continue
            if key in _BLOB_KEYS and isinstance(v, str):
                clean[k] = f"<base64 {len(v)} chars>"
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if isinstance(obj, BaseModel):
        return _sanitize(obj.model_dump(by_alias=True))
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    Emits a ``call_start`` event before the decorated function runs and
    a ``call_end`` event after it returns, both at DEBUG level, with the
    arguments and the result passed through ``_sanitize``.

    Examples
    --------

    >>> @log_call
    ... def get_reference(name):
    ...     return {"name": name}
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__name__,
                "args": _sanitize(args),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__name__,
                "result": _sanitize(result),
            }))
        return result

    # FastAPI reads the signature to build its dependency graph.
    wrapper.__signature__ = inspect.signature(func)  # type: ignore[attr-defined]
    return wrapper


def log_http_request(method: str, url: str, *, params: Dict[str, Any] | None = None,
                     json_body: Dict[str, Any] | None = None, attempt: int | None = None,
                     status: int | None = None, duration_ms: float | None = None) -> None:
    """Log an outbound WMS request at DEBUG level.

    Called by the request executor before and after each attempt. Only
    high‑level information is recorded: method, URL, the sanitised
    parameters, the attempt number, and once the attempt finishes the
    status code and duration.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    params : dict, optional
        Query parameters for non‑JSON methods.
    json_body : dict, optional
        JSON payload for POST and PUT.
    attempt : int, optional
        1-based attempt number within the retry schedule.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "wms_request",
        "method": method,
        "url": url,
    }
    if params:
        data["params"] = _sanitize(params)
    if json_body:
        data["json"] = _sanitize(json_body)
    if attempt is not None:
        data["attempt"] = attempt
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
