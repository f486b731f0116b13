"""
routes/nomenclature.py
----------------------

API routes for nomenclature (goods) lists, details and remains.
"""

from fastapi import APIRouter, Depends

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.logging_config import log_call
from wms_bridge.routes.deps import get_wms_client
from wms_bridge.schemas.common import IdsRequest

router = APIRouter(prefix="/nomenclature", tags=["Nomenclature"])


@router.get("/depositors/{company_id}", summary="Nomenclature codes of a depositor")
@log_call
def get_nomenclature_list(company_id: str, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_nomenclature_list(company_id)


@router.post("/info", summary="Nomenclature details")
@log_call
def post_nomenclature_info(data: IdsRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_nomenclature_info(data.ids)


@router.post("/remains", summary="Nomenclature stock remains")
@log_call
def post_nomenclature_remains(data: IdsRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_nomenclature_remains(data.ids)
