# main.py
from __future__ import annotations

import json
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

# Import logging utilities early so that the logger configuration is
# applied before any other modules emit log messages.
from wms_bridge.logging_config import logger

from wms_bridge.clients.http_client import RetryingRequestExecutor
from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.core.company_store import CompanyStore
from wms_bridge.core.config import WmsSettings, get_settings
from wms_bridge.core.errors import DecodeError, TransientUpstreamError, TransportError, WmsError
from wms_bridge import routes

# Status returned to our callers for each executor failure class.
ERROR_STATUS = {
    TransientUpstreamError: 502,
    TransportError: 504,
    DecodeError: 502,
}


def create_app(settings: Optional[WmsSettings] = None, company_store: Optional[CompanyStore] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # one executor per process so NTLM connections are reused
        executor = RetryingRequestExecutor(settings or get_settings())
        app.state.wms_client = WmsClient(executor, company_store)
        try:
            yield
        finally:
            app.state.wms_client.close()

    app = FastAPI(title="WMS bridge", default_response_class=ORJSONResponse, lifespan=lifespan)

    for name in routes.__all__:
        app.include_router(getattr(routes, name).router)

    @app.exception_handler(WmsError)
    async def wms_error_handler(request: Request, exc: WmsError):
        status_code = ERROR_STATUS.get(type(exc), 502)
        logger.error(json.dumps({
            "event": "wms_error",
            "path": request.url.path,
            "error": type(exc).__name__,
            "detail": str(exc),
        }))
        return ORJSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    # -----------------------------------------------------------------
    # Request logging middleware
    # -----------------------------------------------------------------
    @app.middleware("http")  # type: ignore[misc]
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000
        logger.info(json.dumps({
            "event": "http_request",
            "path": request.url.path,
            "method": request.method,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }))
        return response

    return app


app = create_app()
