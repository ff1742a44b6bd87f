"""Ollama model provider for listing and loading chat and embedding models."""

from modelgate.exceptions import (
    ConfigError,
    ModelGateError,
    ModelNotFoundError,
    ProviderConnectionError,
    ProviderNotFoundError,
)
from modelgate.providers import (
    OllamaConfig,
    OllamaProvider,
    create_provider,
    get_provider_class,
    resolve_base_url,
)
from modelgate.schemas.provider import Model, ModelList, ProviderMetadata

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "Model",
    "ModelGateError",
    "ModelList",
    "ModelNotFoundError",
    "OllamaConfig",
    "OllamaProvider",
    "ProviderConnectionError",
    "ProviderMetadata",
    "ProviderNotFoundError",
    "create_provider",
    "get_provider_class",
    "resolve_base_url",
]
