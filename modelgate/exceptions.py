"""modelgate exceptions."""

from __future__ import annotations


class ModelGateError(Exception):
    """Base exception for all modelgate errors."""


class ConfigError(ModelGateError, ValueError):
    """Raised when a raw provider configuration is invalid or incomplete."""


class ProviderConnectionError(ModelGateError, ConnectionError):
    """Raised when a provider's server cannot be reached at the transport level."""

    base_url: str

    def __init__(self, message: str, *, base_url: str) -> None:
        super().__init__(message)
        self.message = message
        self.base_url = base_url


class ModelNotFoundError(ModelGateError, LookupError):
    """Raised when a requested model key is not offered by the provider."""

    key: str
    kind: str

    def __init__(self, message: str, *, key: str, kind: str) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.kind = kind


class ProviderNotFoundError(ModelGateError, LookupError):
    """Raised when a provider id or provider type is not registered."""

    provider_id: str

    def __init__(self, provider_id: str, *, message: str | None = None) -> None:
        if message is None:
            message = f"Provider not found: {provider_id}"
        super().__init__(message)
        self.message = message
        self.provider_id = provider_id
