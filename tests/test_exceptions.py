"""Tests for the modelgate exception hierarchy."""

from modelgate.exceptions import (
    ConfigError,
    ModelGateError,
    ModelNotFoundError,
    ProviderConnectionError,
    ProviderNotFoundError,
)


def test_all_errors_share_base():
    errors = [
        ConfigError("bad"),
        ProviderConnectionError("down", base_url="http://x:1"),
        ModelNotFoundError("missing", key="k", kind="chat"),
        ProviderNotFoundError("p"),
    ]

    assert all(isinstance(e, ModelGateError) for e in errors)


def test_builtin_bases():
    assert issubclass(ConfigError, ValueError)
    assert issubclass(ProviderConnectionError, ConnectionError)
    assert issubclass(ModelNotFoundError, LookupError)
    assert issubclass(ProviderNotFoundError, LookupError)


def test_connection_error_attributes():
    error = ProviderConnectionError("cannot connect", base_url="http://x:1")

    assert str(error) == "cannot connect"
    assert error.message == "cannot connect"
    assert error.base_url == "http://x:1"


def test_provider_not_found_default_message():
    error = ProviderNotFoundError("ollama-9")

    assert str(error) == "Provider not found: ollama-9"
    assert error.provider_id == "ollama-9"
