"""
schemas/common.py
-----------------

Request shapes shared by several WMS routes: identifier batches and
date ranges with an optional depositor filter.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class IdsRequest(BaseModel):
    """A batch of WMS identifiers."""
    ids: List[str] = Field(..., alias="id")

    model_config = {
        "populate_by_name": True
    }


class PeriodRequest(BaseModel):
    """Date range, optionally restricted to some depositors.

    An empty or missing ``depositor_ids`` list means no filter at all.
    """
    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")
    depositor_ids: Optional[List[str]] = Field(None, alias="depositorId")

    model_config = {
        "populate_by_name": True
    }
