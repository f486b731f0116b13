"""
schemas/orders.py
-----------------

Models for listing and fetching WMS orders. The order type (arrivals,
shipments, ...) travels in the route path, not in the body.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class OrdersListRequest(BaseModel):
    depositor_id: str = Field(..., alias="depositorId")
    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")
    order_status: Optional[str] = Field(None, alias="status")

    model_config = {
        "populate_by_name": True
    }


class OrdersInfoRequest(BaseModel):
    """Identifiers of the orders to fetch and whether to include lines."""
    ids: List[str] = Field(..., alias="id")
    detailed: bool = False

    model_config = {
        "populate_by_name": True
    }
