"""
routes/companies.py
-------------------

API routes for organisations, depositors, company details and mailing
address lists.
"""

import json

from fastapi import APIRouter, Depends, Query

from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.logging_config import logger, log_call
from wms_bridge.routes.deps import get_wms_client
from wms_bridge.schemas.companies import MailingAddressesUpdate

router = APIRouter(tags=["Companies"])


@router.get("/organizations", summary="Organisations operating the warehouse")
@log_call
def get_own_organizations(wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_own_organizations()


@router.get("/depositors", summary="Depositor companies")
@log_call
def get_companies_list(wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_companies_list()


@router.get("/companies/{company_id}", summary="Company details")
@log_call
def get_company_info(
    company_id: str,
    supplier: bool = Query(False, description="Serve known suppliers from the local company store."),
    wms_client: WmsClient = Depends(get_wms_client),
):
    """Company details; suppliers are kept in the local store after the first lookup."""
    logger.info(json.dumps({
        "event": "company_info_request",
        "company_id": company_id,
        "supplier": supplier,
    }))
    return wms_client.get_company_info(company_id, supplier=supplier)


@router.get("/companies/{company_id}/mailing-addresses", summary="Mailing address lists of a company")
@log_call
def get_mailing_addresses(company_id: str, wms_client: WmsClient = Depends(get_wms_client)):
    return wms_client.get_mailing_addresses_list(company_id)


@router.put("/companies/{company_id}/mailing-addresses", summary="Replace a mailing address list")
@log_call
def put_mailing_addresses(
    company_id: str,
    data: MailingAddressesUpdate,
    wms_client: WmsClient = Depends(get_wms_client),
):
    logger.info(json.dumps({
        "event": "mailing_addresses_update",
        "company_id": company_id,
        "mailing_id": data.mailing_id,
    }))
    return wms_client.put_mailing_addresses(company_id, data.mailing_id, data.addresses)
