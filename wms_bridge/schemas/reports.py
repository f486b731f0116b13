"""
schemas/reports.py
------------------

Models for WMS report routes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SerialNumbersReportRequest(BaseModel):
    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")
    depositor_id: str = Field(..., alias="depositorId")

    model_config = {
        "populate_by_name": True
    }
