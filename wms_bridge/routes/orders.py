"""
routes/orders.py
----------------

API routes for WMS orders. The order type (``arrivals``, ``shipments``
and so on) is part of the path and selects the WMS endpoint. Templates
can be built from an uploaded CSV file.
"""

import json
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, File, Form, UploadFile

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.core.files import RawBytes
from wms_bridge.logging_config import logger, log_call
from wms_bridge.routes.deps import get_wms_client
from wms_bridge.schemas.orders import OrdersInfoRequest, OrdersListRequest

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("/{order_type}/list", summary="List orders of a type")
@log_call
def post_orders_list(order_type: str, data: OrdersListRequest, wms_client: WmsClient = Depends(get_wms_client)):
    logger.info(json.dumps({
        "event": "orders_list_request",
        "order_type": order_type,
        "depositor_id": data.depositor_id,
        "status": data.order_status,
    }))
    return wms_client.get_orders_list(
        order_type,
        data.depositor_id,
        data.start_date,
        data.end_date,
        data.order_status,
    )


@router.post("/{method}/info", summary="Fetch orders by identifier")
@log_call
def post_orders_info(method: str, data: OrdersInfoRequest, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_orders_info(method, data.ids, data.detailed)


@router.post("/{order_type}/template-from-csv", summary="Build an order template from a CSV file")
def post_orders_template_from_csv(
    order_type: str,
    depositor_id: str = Form(..., alias="depositorId"),
    organization_id: str = Form(..., alias="organizationId"),
    options: str = Form(..., description="Receipt type for arrivals, shipping direction otherwise."),
    file_name: Optional[str] = Form(None, alias="fileName"),
    file: UploadFile = File(...),
    wms_client: WmsClient = Depends(get_wms_client),
):
    content = file.file.read()
    logger.info(json.dumps({
        "event": "orders_template_upload",
        "order_type": order_type,
        "depositor_id": depositor_id,
        "file_name": file_name or file.filename,
        "size": len(content),
    }))
    return wms_client.post_orders_template_from_csv(
        depositor_id,
        organization_id,
        RawBytes(content=content, name=file.filename),
        order_type,
        options,
        file_name,
    )


@router.post("/{order_type}", summary="Create an order")
@log_call
def post_order(order_type: str, data: Dict[str, Any] = Body(...), wms_client: WmsClient = Depends(get_wms_client)):
    logger.info(json.dumps({"event": "order_create", "order_type": order_type}))
    return wms_client.post_order(order_type, data)


@router.put("/{order_type}", summary="Update an order")
@log_call
def put_order(order_type: str, data: Dict[str, Any] = Body(...), wms_client: WmsClient = Depends(get_wms_client)):
    logger.info(json.dumps({"event": "order_update", "order_type": order_type}))
    return wms_client.put_order(order_type, data)
