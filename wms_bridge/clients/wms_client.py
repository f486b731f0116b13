"""
clients/wms_client.py
---------------------

Domain call sites of the WMS HTTP API.

:class:`WmsClient` maps each WMS operation to a fixed verb and path and
builds the parameter mapping the WMS expects. All calls go through the
shared :class:`~wms_bridge.clients.http_client.RetryingRequestExecutor`,
so every method returns the decoded JSON as is and raises the errors
defined in :mod:`wms_bridge.core.errors`.

List methods that accept an optional filter omit the ``fieldFilter``
key entirely when the filter is absent or empty; the WMS treats a
present but empty filter as "match nothing".
"""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional, Sequence

from wms_bridge.clients.http_client import RetryingRequestExecutor
from wms_bridge.core.company_store import CompanyStore, InMemoryCompanyStore
from wms_bridge.core.files import FileInput


def with_field_filter(params: Dict[str, Any], key: str, values: Optional[Sequence[Any]]) -> Dict[str, Any]:
    """Return ``params`` with ``fieldFilter.<key>`` set when ``values`` is non-empty."""
    if values:
        params["fieldFilter"] = {key: list(values)}
    return params


class WmsClient:
    """Facade over the WMS API.

    :param executor: request executor shared by all calls
    :param company_store: local store consulted by supplier lookups;
        an in-memory store is used when omitted
    """

    def __init__(self, executor: RetryingRequestExecutor, company_store: Optional[CompanyStore] = None) -> None:
        self.executor = executor
        self.company_store: CompanyStore = company_store if company_store is not None else InMemoryCompanyStore()

    def close(self) -> None:
        self.executor.close()

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.executor.request(method, path, params or {})

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------
    def get_own_organizations(self) -> Any:
        """List the organisations that operate the warehouse."""
        return self._request("get", "companies")

    def get_companies_list(self) -> Any:
        """List the depositor companies."""
        return self._request("get", "depositors")

    def get_company_info(self, company_id: str, supplier: bool = False) -> Any:
        """Return detailed information about a company.

        Supplier lookups are served from the company store when the
        company is already known; otherwise the WMS is asked and the
        answer is stored under the company's WMS code.
        """
        if not supplier:
            return self._request("post", "company", {"id": company_id})
        cached = self.company_store.find(company_id)
        if cached is not None:
            return cached.payload
        company_info = self._request("post", "company", {"id": company_id})
        self.company_store.create(company_info["Code"]["value"], company_id, company_info, True)
        return company_info

    def get_mailing_addresses_list(self, company_id: str) -> Any:
        return self._request("get", "mailing_addresses", {"id": company_id})

    def put_mailing_addresses(self, company_id: str, mailing_id: str, addresses: str) -> Any:
        return self._request("put", "mailing_addresses", {
            "depositorId": company_id,
            "mailingId": mailing_id,
            "addresses": addresses,
        })

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------
    def post_orders_template_from_csv(
        self,
        depositor_id: str,
        organization_id: str,
        file: FileInput,
        order_type: str,
        options: str,
        file_name: Optional[str] = None,
    ) -> Any:
        """Ask the WMS to build an order template from a CSV file.

        ``options`` is the receipt type for arrivals and the shipping
        direction for every other order type.

        :raises ValueError: no file name was given and the input has none
        """
        name = file_name or file.name
        if not name:
            raise ValueError("file name is required when the file input carries none")
        params: Dict[str, Any] = {
            "depositorId": depositor_id,
            "organizationId": organization_id,
            "fileName": name,
            "file": base64.b64encode(file.read()).decode("ascii"),
        }
        if order_type == "arrivals":
            params["receiptType"] = options
        else:
            params["shippingDirection"] = options
        return self._request("post", f"{order_type}_template_from_csv", params)

    def post_order(self, order_type: str, order_data: Dict[str, Any]) -> Any:
        return self._request("post", f"{order_type}_store", order_data)

    def put_order(self, order_type: str, order_data: Dict[str, Any]) -> Any:
        return self._request("put", order_type, order_data)

    def get_orders_list(
        self,
        order_type: str,
        depositor_id: str,
        start_date: str,
        end_date: str,
        order_status: Optional[str] = None,
    ) -> Any:
        """List orders of one type, optionally restricted to a status."""
        params: Dict[str, Any] = {
            "depositorId": depositor_id,
            "startDate": start_date,
            "endDate": end_date,
        }
        with_field_filter(params, "status", [order_status] if order_status else None)
        return self._request("post", order_type, params)

    def get_orders_info(self, method: str, order_ids: List[str], detailed: bool = False) -> Any:
        return self._request("post", method, {"id": order_ids, "detailed": detailed})

    # ------------------------------------------------------------------
    # Nomenclature and reference books
    # ------------------------------------------------------------------
    def get_nomenclature_list(self, company_id: str) -> Any:
        return self._request("get", "nomenclature_depositor_list", {"id": company_id})

    def get_nomenclature_info(self, nomenclature_ids: List[str]) -> Any:
        return self._request("post", "nomenclature", {"id": nomenclature_ids})

    def get_nomenclature_remains(self, nomenclature_ids: List[str]) -> Any:
        return self._request("post", "nomenclature_remains", {"id": nomenclature_ids})

    def get_reference(self, reference_name: str) -> Any:
        """Return the fields of a WMS reference book (``warehouses``, ...)."""
        return self._request("get", f"reference/{reference_name}")

    def get_car_brands(self) -> Any:
        """Return the current list of car brands.

        This endpoint is served by a different 1C base than the rest of
        the WMS and is the one most likely to exhaust the retry schedule.
        """
        return self._request("get", "carbrands")

    # ------------------------------------------------------------------
    # Flights
    # ------------------------------------------------------------------
    def get_flights_list(self, start_date: str, end_date: str, depositor_ids: Optional[Sequence[str]] = None) -> Any:
        params: Dict[str, Any] = {"startDate": start_date, "endDate": end_date}
        return self._request("post", "flights_list", with_field_filter(params, "depositor", depositor_ids))

    def get_flights_info(self, flight_ids: List[str]) -> Any:
        return self._request("post", "flights", {"id": flight_ids})

    def post_flight(self, flight_data: Dict[str, Any]) -> Any:
        return self._request("post", "flights_store", flight_data)

    def put_flight(self, flight_data: Dict[str, Any]) -> Any:
        return self._request("put", "flights", flight_data)

    # ------------------------------------------------------------------
    # Passages
    # ------------------------------------------------------------------
    def get_passages_list(self, start_date: str, end_date: str, depositor_ids: Optional[Sequence[str]] = None) -> Any:
        """List vehicle passages issued between two dates."""
        params: Dict[str, Any] = {"startDate": start_date, "endDate": end_date}
        return self._request("post", "passages_list", with_field_filter(params, "depositor", depositor_ids))

    def get_passages_info(self, passage_ids: List[str]) -> Any:
        return self._request("post", "passages", {"id": passage_ids})

    def post_passage(self, passage_data: Dict[str, Any]) -> Any:
        return self._request("post", "passages_store", passage_data)

    def put_passage(self, passage_data: Dict[str, Any]) -> Any:
        return self._request("put", "passages", passage_data)

    # ------------------------------------------------------------------
    # Refunds and reports
    # ------------------------------------------------------------------
    def get_refunds_list(self, start_date: str, end_date: str, depositor_ids: Optional[Sequence[str]] = None) -> Any:
        params: Dict[str, Any] = {"startDate": start_date, "endDate": end_date}
        return self._request("post", "refunds_list", with_field_filter(params, "depositor", depositor_ids))

    def get_refunds_info(self, refund_ids: List[str]) -> Any:
        return self._request("post", "refunds", {"id": refund_ids})

    def get_serial_numbers_report(self, start_date: str, end_date: str, depositor_id: str) -> Any:
        """Report serial numbers of goods moved for a depositor."""
        return self._request("post", "report_serialnumbers", {
            "startDate": start_date,
            "endDate": end_date,
            "depositorId": depositor_id,
        })
