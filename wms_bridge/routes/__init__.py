"""
Route aggregation package for the WMS bridge.

Each functional area of the WMS API (companies, orders, nomenclature,
reference books, flights, passages, refunds and reports) has its own
module defining an ``APIRouter``. The application factory in
:mod:`wms_bridge.main` includes every router listed in ``__all__``.
"""

__all__ = [
    "companies",
    "orders",
    "nomenclature",
    "reference",
    "flights",
    "passages",
    "refunds",
    "reports",
]

from . import companies, orders, nomenclature, reference, flights, passages, refunds, reports  # noqa: E402,F401
