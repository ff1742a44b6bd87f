"""Configuration and the configured provider registry."""

from modelgate.core.config import Settings, get_settings
from modelgate.core.registry import (
    ConfiguredProviderRegistry,
    get_configured_model_provider_by_id,
    get_default_registry,
)

__all__ = [
    "ConfiguredProviderRegistry",
    "Settings",
    "get_configured_model_provider_by_id",
    "get_default_registry",
    "get_settings",
]
