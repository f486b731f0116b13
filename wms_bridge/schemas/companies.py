"""
schemas/companies.py
--------------------

Models for company related routes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MailingAddressesUpdate(BaseModel):
    mailing_id: str = Field(..., alias="mailingId")
    addresses: str

    model_config = {
        "populate_by_name": True
    }
