"""
clients/http_client.py
----------------------

Retrying request executor for the WMS HTTP API.

Every call to the WMS goes through :class:`RetryingRequestExecutor`.
It attaches the configured credentials, places the parameters in the
JSON body (POST, PUT) or in the query string (everything else), and
walks a fixed attempt schedule when the WMS answers with an HTTP error.

The schedule exists because the NTLM handshake of the WMS web server
intermittently rejects the first negotiation with a 401. A short,
increasing backoff clears it without penalising the common case where
the first attempt succeeds. Transport failures and malformed payloads
are not part of that race and are raised on first occurrence.

Connections are pooled per thread: FastAPI runs sync endpoints in a
threadpool and ``HttpNtlmAuth`` keeps handshake state on the instance,
so each worker thread gets its own ``requests.Session`` and auth
handler. Create a single executor per process and close it on shutdown.
"""

from __future__ import annotations

import json
import threading
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urljoin

import requests
from requests.auth import AuthBase, HTTPBasicAuth
from requests_ntlm import HttpNtlmAuth

from wms_bridge.core.config import RETRY_DELAYS, WmsSettings
from wms_bridge.core.errors import DecodeError, TransientUpstreamError, TransportError
from wms_bridge.logging_config import log_http_request, logger

__all__ = ["JSON_METHODS", "RETRY_DELAYS", "RetryingRequestExecutor", "build_auth"]

# Methods whose parameters always travel as a JSON body.
JSON_METHODS = frozenset({"post", "put"})


def build_auth(settings: WmsSettings) -> AuthBase:
    """Return the ``requests`` auth handler for the configured scheme."""
    password = settings.password.get_secret_value()
    if settings.auth_scheme == "basic":
        return HTTPBasicAuth(settings.username, password)
    return HttpNtlmAuth(settings.username, password)


class RetryingRequestExecutor:
    """Execute WMS calls with credentials and a bounded retry schedule.

    :param settings: connection settings; read once, never mutated
    :param session: HTTP session shared by every thread; when omitted
        each calling thread lazily opens its own ``requests.Session``
    :param sleep: callable used to wait between attempts

    The auth handler is always built per thread, because ``HttpNtlmAuth``
    replaces its ``session_security`` on every handshake.
    """

    def __init__(
        self,
        settings: WmsSettings,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.base_uri = settings.base_uri
        self.timeout = settings.http_timeout
        self.delays: Tuple[float, ...] = tuple(settings.retry_delays)
        self._settings = settings
        self._shared_session = session
        self._sleep = sleep
        self._local = threading.local()
        self._lock = threading.Lock()
        self._sessions: List[requests.Session] = []

    def _thread_state(self) -> Tuple[requests.Session, AuthBase]:
        """Return the session and auth handler of the calling thread."""
        state = getattr(self._local, "state", None)
        if state is None:
            session = self._shared_session
            if session is None:
                session = requests.Session()
                with self._lock:
                    self._sessions.append(session)
            state = (session, build_auth(self._settings))
            self._local.state = state
        return state

    def close(self) -> None:
        """Close every session and release pooled connections."""
        with self._lock:
            sessions, self._sessions = self._sessions, []
        if self._shared_session is not None:
            sessions.append(self._shared_session)
        for session in sessions:
            session.close()

    def build_options(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Return the keyword arguments for one attempt of ``method``.

        The placement of ``params`` depends on the verb only.
        """
        placement = "json" if method.lower() in JSON_METHODS else "params"
        return {
            "auth": self._thread_state()[1],
            placement: dict(params or {}),
            "timeout": self.timeout,
        }

    def url_for(self, path: str) -> str:
        return urljoin(self.base_uri, path)

    def request(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Perform one logical WMS call and return the decoded JSON.

        :param method: HTTP verb (``get``, ``post``, ``put``, ...)
        :param path: WMS API path relative to the base URI
        :param params: parameters sent as JSON body or query string
        :raises TransientUpstreamError: every attempt got an HTTP error
        :raises TransportError: the first transport failure
        :raises DecodeError: the successful body is not valid JSON
        """
        url = self.url_for(path)
        options = self.build_options(method, params)
        last_attempt = len(self.delays)
        for attempt, delay in enumerate(self.delays, start=1):
            try:
                content = self._call(method, path, url, options, attempt, delay)
            except TransientUpstreamError as exc:
                if attempt == last_attempt:
                    raise
                logger.debug(json.dumps({
                    "event": "wms_retry",
                    "method": method.upper(),
                    "path": path,
                    "attempt": attempt,
                    "status_code": exc.status_code,
                    "next_delay": self.delays[attempt],
                }))
                continue
            return self.decode(method, path, content)
        raise RuntimeError("retry schedule is empty")

    def _call(self, method: str, path: str, url: str, options: Dict[str, Any], attempt: int, delay: float) -> bytes:
        """Run a single attempt, sleeping ``delay`` seconds first."""
        if delay:
            self._sleep(delay)
        log_http_request(method.upper(), url, params=options.get("params"),
                         json_body=options.get("json"), attempt=attempt)
        session, _ = self._thread_state()
        start_time = time.time()
        try:
            response = session.request(method.upper(), url, **options)
        except requests.RequestException as exc:
            raise TransportError(method, path, str(exc)) from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request(method.upper(), url, attempt=attempt,
                         status=response.status_code, duration_ms=duration_ms)
        if response.status_code >= 400:
            raise TransientUpstreamError(method, path, response.status_code, response.text)
        return response.content

    @staticmethod
    def decode(method: str, path: str, content: bytes) -> Any:
        """Parse a response body as JSON."""
        try:
            return json.loads(content)
        except (TypeError, ValueError) as exc:
            raise DecodeError(method, path, content, str(exc)) from exc
