import pytest
from pydantic import ValidationError

from wms_bridge.core.config import RETRY_DELAYS, WmsSettings, get_settings


@pytest.fixture
def wms_env(monkeypatch):
    monkeypatch.setenv("WMS_BASE_URI", "http://wms.example/hs/api/")
    monkeypatch.setenv("WMS_USERNAME", "DOMAIN\\robot")
    monkeypatch.setenv("WMS_PASSWORD", "s3cret")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_read_from_environment(wms_env):
    settings = WmsSettings()

    assert settings.base_uri == "http://wms.example/hs/api/"
    assert settings.username == "DOMAIN\\robot"
    assert settings.password.get_secret_value() == "s3cret"
    assert settings.auth_scheme == "ntlm"
    assert settings.retry_delays == RETRY_DELAYS


def test_password_is_masked_in_repr(wms_env):
    assert "s3cret" not in repr(WmsSettings())


def test_retry_delays_from_json_env(wms_env, monkeypatch):
    monkeypatch.setenv("WMS_RETRY_DELAYS", "[0, 0.5, 1.5]")
    assert WmsSettings().retry_delays == (0.0, 0.5, 1.5)


def test_default_schedule_is_six_attempts():
    assert RETRY_DELAYS == (0.0, 0.2, 0.3, 0.4, 0.6, 1.0)


@pytest.mark.parametrize("delays", [(), (0, -1)])
def test_invalid_retry_delays_rejected(delays):
    with pytest.raises(ValidationError):
        WmsSettings(base_uri="http://x/", username="u", password="p", retry_delays=delays)


def test_unknown_auth_scheme_rejected():
    with pytest.raises(ValidationError):
        WmsSettings(base_uri="http://x/", username="u", password="p", auth_scheme="kerberos")


def test_settings_are_frozen():
    settings = WmsSettings(base_uri="http://x/", username="u", password="p")
    with pytest.raises(ValidationError):
        settings.username = "other"


def test_get_settings_is_cached(wms_env):
    assert get_settings() is get_settings()
