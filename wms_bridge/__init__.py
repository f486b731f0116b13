"""
wms_bridge package
------------------

Client facade for the warehouse management system (WMS) HTTP API and
the FastAPI service that exposes it. The retrying executor lives in
:mod:`wms_bridge.clients.http_client`; the domain call sites live in
:mod:`wms_bridge.clients.wms_client`. The ASGI application is built by
:func:`wms_bridge.main.create_app`.
"""

__all__ = ["clients", "core", "routes", "schemas"]
