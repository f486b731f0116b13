import pytest
from pydantic import ValidationError

from wms_bridge.core.company_store import Company, InMemoryCompanyStore


def test_find_returns_none_for_unknown_company():
    assert InMemoryCompanyStore().find("missing") is None


def test_create_then_find():
    store = InMemoryCompanyStore()

    created = store.create("000000003", "900e0763", {"inn": "5074116672"}, True)

    assert store.find("900e0763") == created
    assert created == Company(code="000000003", wms_id="900e0763", payload={"inn": "5074116672"}, supplier=True)
    assert len(store) == 1


def test_clear_empties_store():
    store = InMemoryCompanyStore()
    store.create("1", "a", {}, False)
    store.clear()
    assert store.find("a") is None


def test_company_is_immutable():
    company = Company(code="1", wms_id="a", payload={})
    with pytest.raises(ValidationError):
        company.code = "2"
