"""
routes/flights.py
-----------------

API routes for flights: listing by period, fetching by identifier,
creation and update.
"""

import json
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.logging_config import logger, log_call
from wms_bridge.routes.deps import get_wms_client
from wms_bridge.schemas.common import IdsRequest, PeriodRequest

router = APIRouter(prefix="/flights", tags=["Flights"])


@router.post("/list", summary="List flights in a period")
@log_call
def post_flights_list(data: PeriodRequest, wms_client: WmsClient = Depends(get_wms_client)):
    logger.info(json.dumps({
        "event": "flights_list_request",
        "start_date": data.start_date,
        "end_date": data.end_date,
        "depositors": len(data.depositor_ids or []),
    }))
    return wms_client.get_flights_list(data.start_date, data.end_date, data.depositor_ids)


@router.post("/info", summary="Fetch flights by identifier")
@log_call
def post_flights_info(data: IdsRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_flights_info(data.ids)


@router.post("", summary="Create a flight")
@log_call
def post_flight(data: Dict[str, Any] = Body(...), wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.post_flight(data)


@router.put("", summary="Update a flight")
@log_call
def put_flight(data: Dict[str, Any] = Body(...), wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.put_flight(data)
