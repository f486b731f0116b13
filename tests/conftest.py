import pytest
import requests

from wms_bridge.clients.http_client import RetryingRequestExecutor
from wms_bridge.clients.wms_client import WmsClient
from wms_bridge.core.company_store import InMemoryCompanyStore
from wms_bridge.core.config import WmsSettings

BASE_URI = "http://wms.local/hs/api/"


@pytest.fixture
def make_response(mocker):
    """Factory for stand-ins of ``requests.Response``."""

    def build_response(status_code=200, content=b"{}"):
        response = mocker.MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.content = content
        response.text = content.decode("utf-8", errors="replace")
        return response

    return build_response


@pytest.fixture
def settings():
    return WmsSettings(base_uri=BASE_URI, username="wms-user", password="wms-pass")


@pytest.fixture
def session(mocker, make_response):
    mock = mocker.MagicMock(spec=requests.Session)
    mock.request.return_value = make_response(200, b'{"ok": true}')
    return mock


@pytest.fixture
def sleeps():
    """Delays the executor asked to wait, in call order."""
    return []


@pytest.fixture
def executor(settings, session, sleeps):
    return RetryingRequestExecutor(settings, session=session, sleep=sleeps.append)


@pytest.fixture
def company_store():
    return InMemoryCompanyStore()


@pytest.fixture
def wms_client(executor, company_store):
    return WmsClient(executor, company_store)
