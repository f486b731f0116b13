"""
routes/reference.py
-------------------

API routes for WMS reference books and the car brand list.
"""

from fastapi import APIRouter, Depends

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.logging_config import log_call
from wms_bridge.routes.deps import get_wms_client

router = APIRouter(tags=["Reference"])


@router.get("/reference/{name}", summary="Fields of a reference book")
@log_call
def get_reference(name: str, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_reference(name)


@router.get("/carbrands", summary="Current car brand list")
@log_call
def get_car_brands(wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_car_brands()
