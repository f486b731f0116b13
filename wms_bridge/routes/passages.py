"""
routes/passages.py
------------------

API routes for vehicle passages (transport passes).
"""

import json
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.logging_config import logger, log_call
from wms_bridge.routes.deps import get_wms_client
from wms_bridge.schemas.common import IdsRequest, PeriodRequest

router = APIRouter(prefix="/passages", tags=["Passages"])


@router.post("/list", summary="List passages in a period")
@log_call
def post_passages_list(data: PeriodRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_passages_list(data.start_date, data.end_date, data.depositor_ids)


@router.post("/info", summary="Fetch passages by identifier")
@log_call
def post_passages_info(data: IdsRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_passages_info(data.ids)


@router.post("", summary="Create a passage")
@log_call
def post_passage(data: Dict[str, Any] = Body(...), wms_client: WmsClient = Depends(get_wms_client)):
    logger.info(json.dumps({"event": "passage_create"}))
    return wms_client.post_passage(data)


@router.put("", summary="Update a passage")
@log_call
def put_passage(data: Dict[str, Any] = Body(...), wms_client: WmsClient = Depends(get_wms_client)):
    logger.info(json.dumps({"event": "passage_update"}))
    return wms_client.put_passage(data)
