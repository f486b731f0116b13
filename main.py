"""
Root application entry point for the WMS bridge
===============================================

This module exposes the FastAPI application instance defined in
``wms_bridge/main.py`` so that deployment tools like Uvicorn can import
``main:app`` from the repository root.

Usage
-----

Set ``WMS_BASE_URI``, ``WMS_USERNAME`` and ``WMS_PASSWORD`` and point
Uvicorn at this module:

.. code-block:: bash

    uvicorn main:app --host 0.0.0.0 --port 8000
"""

from wms_bridge.main import app  # noqa: F401 re-export for Uvicorn

__all__ = ["app"]
