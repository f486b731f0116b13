"""
core/company_store.py
----------------------

Local store of counterparty companies fetched from the WMS.

Supplier lookups go through this store first so that a company the
bridge has already seen is served without another round trip. The
in-memory implementation keeps records in process memory, keyed by the
WMS company identifier; in a multi‑worker deployment each worker has
its own copy. Plug a persistent implementation in through the
:class:`CompanyStore` protocol when records must survive restarts.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from pydantic import BaseModel, ConfigDict


class Company(BaseModel):
    """A company record cached from the WMS ``company`` endpoint."""

    code: str
    wms_id: str
    payload: Any
    supplier: bool = False

    model_config = ConfigDict(frozen=True)


class CompanyStore(Protocol):
    def find(self, wms_id: str) -> Optional[Company]:
        ...

    def create(self, code: str, wms_id: str, payload: Any, supplier: bool) -> Company:
        ...


class InMemoryCompanyStore:
    """Process-local :class:`CompanyStore`."""

    def __init__(self) -> None:
        self._companies: Dict[str, Company] = {}

    def find(self, wms_id: str) -> Optional[Company]:
        """Return the stored company for a WMS identifier, if any."""
        return self._companies.get(wms_id)

    def create(self, code: str, wms_id: str, payload: Any, supplier: bool) -> Company:
        """Persist a company record and return it."""
        company = Company(code=code, wms_id=wms_id, payload=payload, supplier=supplier)
        self._companies[wms_id] = company
        return company

    def clear(self) -> None:
        """Remove every stored company."""
        self._companies.clear()

    def __len__(self) -> int:
        return len(self._companies)
