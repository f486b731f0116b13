"""
routes/refunds.py
-----------------

API routes for refunds.
"""

from fastapi import APIRouter, Depends

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.logging_config import log_call
from wms_bridge.routes.deps import get_wms_client
from wms_bridge.schemas.common import IdsRequest, PeriodRequest

router = APIRouter(prefix="/refunds", tags=["Refunds"])


@router.post("/list", summary="List refunds in a period")
@log_call
def post_refunds_list(data: PeriodRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_refunds_list(data.start_date, data.end_date, data.depositor_ids)


@router.post("/info", summary="Fetch refunds by identifier")
@log_call
def post_refunds_info(data: IdsRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_refunds_info(data.ids)
