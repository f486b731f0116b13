"""
routes/deps.py
--------------

FastAPI dependencies shared by the routers.
"""

from fastapi import Request

from wms_bridge.clients.wms_client import WmsClient


def get_wms_client(request: Request) -> WmsClient:
    """Return the WMS client created in the application lifespan."""
    return request.app.state.wms_client
