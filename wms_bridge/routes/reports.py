"""
routes/reports.py
-----------------

API routes for WMS reports.
"""

import json

from fastapi import APIRouter, Depends

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.logging_config import logger, log_call
from wms_bridge.routes.deps import get_wms_client
from wms_bridge.schemas.reports import SerialNumbersReportRequest

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post("/serial-numbers", summary="Serial numbers report")
@log_call
def post_serial_numbers_report(data: SerialNumbersReportRequest, wms_client: WmsClient = Depends(get_wms_client)):
    logger.info(json.dumps({
        "event": "serial_numbers_report_request",
        "depositor_id": data.depositor_id,
        "start_date": data.start_date,
        "end_date": data.end_date,
    }))
    return wms_client.get_serial_numbers_report(data.start_date, data.end_date, data.depositor_id)
