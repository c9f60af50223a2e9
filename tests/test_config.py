import pytest

from unifuncs_mcp_server.config import (
    DEFAULT_API_BASE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SSE_PORT,
    load_settings,
)
from unifuncs_mcp_server.errors import ConfigurationError


def test_missing_api_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="UNIFUNCS_API_KEY"):
        load_settings({})


def test_blank_api_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        load_settings({"UNIFUNCS_API_KEY": "   "})


def test_defaults():
    settings = load_settings({"UNIFUNCS_API_KEY": "sk-test"})

    assert settings.api_key == "sk-test"
    assert settings.api_base == DEFAULT_API_BASE
    assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert settings.sse_enabled is False
    assert settings.sse_port == DEFAULT_SSE_PORT == 5656


def test_sse_selected_by_environment():
    settings = load_settings({
        "UNIFUNCS_API_KEY": "sk-test",
        "UNIFUNCS_SSE_SERVER": "1",
        "UNIFUNCS_SSE_SERVER_PORT": "8080",
        "UNIFUNCS_SSE_SERVER_HOST": "127.0.0.1",
    })

    assert settings.sse_enabled is True
    assert settings.sse_port == 8080
    assert settings.sse_host == "127.0.0.1"


def test_sse_selected_by_flag():
    assert load_settings({"UNIFUNCS_API_KEY": "sk-test"}, sse=True).sse_enabled is True


def test_overrides():
    settings = load_settings({
        "UNIFUNCS_API_KEY": "sk-test",
        "UNIFUNCS_API_BASE": "http://localhost:9000",
        "UNIFUNCS_REQUEST_TIMEOUT": "12.5",
    })

    assert settings.api_base == "http://localhost:9000"
    assert settings.request_timeout == 12.5


@pytest.mark.parametrize("name,value", [
    ("UNIFUNCS_SSE_SERVER_PORT", "not-a-port"),
    ("UNIFUNCS_SSE_SERVER_PORT", "0"),
    ("UNIFUNCS_REQUEST_TIMEOUT", "-1"),
])
def test_invalid_numbers_are_rejected(name, value):
    with pytest.raises(ConfigurationError, match=name):
        load_settings({"UNIFUNCS_API_KEY": "sk-test", name: value})


def test_settings_are_immutable():
    settings = load_settings({"UNIFUNCS_API_KEY": "sk-test"})
    with pytest.raises(AttributeError):
        settings.api_key = "other"
