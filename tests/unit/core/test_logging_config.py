import json
import logging

from wms_bridge.logging_config import _sanitize, log_call, log_http_request, logger
from wms_bridge.schemas.reports import SerialNumbersReportRequest


def test_sanitize_drops_credentials_and_blobs():
    payload = {
        "depositorId": "D1",
        "password": "hunter2",
        "auth": ("user", "pass"),
        "file": "c2t1O3F0eQo=",
        "lines": [{"token": "t", "qty": 2}],
        "raw": b"\x00\x01",
    }

    assert _sanitize(payload) == {
        "depositorId": "D1",
        "file": "<base64 12 chars>",
        "lines": [{"qty": 2}],
        "raw": "<binary 2 bytes>",
    }


def test_sanitize_matches_auth_keys_exactly():
    payload = {"auth": "x", "Authorization": "NTLM abc", "author": "Ivanov", "authorized": True}

    assert _sanitize(payload) == {"author": "Ivanov", "authorized": True}


def test_sanitize_dumps_pydantic_models_by_alias():
    model = SerialNumbersReportRequest(start_date="2024-01-01", end_date="2024-01-31", depositor_id="D1")
    assert _sanitize(model) == {"startDate": "2024-01-01", "endDate": "2024-01-31", "depositorId": "D1"}


def test_sanitize_falls_back_to_str():
    assert _sanitize(object) == str(object)


def test_log_call_records_start_and_end(caplog):
    @log_call
    def get_reference(name):
        return {"name": name}

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert get_reference("warehouses") == {"name": "warehouses"}

    events = [json.loads(r.getMessage())["event"] for r in caplog.records]
    assert events == ["call_start", "call_end"]


def test_log_http_request_skips_work_above_debug(caplog):
    with caplog.at_level(logging.INFO, logger=logger.name):
        log_http_request("GET", "http://wms/companies", params={"id": "1"})
    assert caplog.records == []


def test_log_http_request_hides_file_payload(caplog):
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        log_http_request("POST", "http://wms/arrivals_template_from_csv",
                         json_body={"fileName": "a.csv", "file": "QUJD"}, attempt=2)

    record = json.loads(caplog.records[0].getMessage())
    assert record["json"] == {"fileName": "a.csv", "file": "<base64 4 chars>"}
    assert record["attempt"] == 2
