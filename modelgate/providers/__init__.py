"""Model providers and the provider-type registry.

Maps provider type keys to their provider classes, and builds provider
instances from raw configuration:
- Ollama (self-hosted or Ollama Cloud)
"""

from typing import Any

from modelgate.core.config import Settings, get_settings
from modelgate.core.registry import ConfiguredProviderRegistry, get_default_registry
from modelgate.exceptions import ProviderNotFoundError
from modelgate.providers.base import BaseModelProvider
from modelgate.providers.ollama import OllamaConfig, OllamaProvider, resolve_base_url

PROVIDERS: dict[str, type[BaseModelProvider[Any]]] = {
    OllamaProvider.get_provider_metadata().key: OllamaProvider,
}


def get_provider_class(provider_type: str) -> type[BaseModelProvider[Any]]:
    """Get the provider class registered for a provider type.

    Raises:
        ProviderNotFoundError: Unknown provider type.
    """
    try:
        return PROVIDERS[provider_type]
    except KeyError:
        raise ProviderNotFoundError(
            provider_type, message=f"Unknown provider type: {provider_type}"
        ) from None


def create_provider(
    provider_type: str,
    id: str,
    name: str,
    raw_config: Any,
    registry: ConfiguredProviderRegistry | None = None,
) -> BaseModelProvider[Any]:
    """Validate a raw config and build a provider instance.

    Raises:
        ProviderNotFoundError: Unknown provider type.
        ConfigError: The raw config is invalid for this provider type.
    """
    provider_cls = get_provider_class(provider_type)
    config = provider_cls.parse_and_validate(raw_config)
    return provider_cls(id, name, config, registry=registry)


def create_configured_provider(
    provider_id: str,
    registry: ConfiguredProviderRegistry | None = None,
) -> BaseModelProvider[Any]:
    """Build the provider instance for a registered provider entry.

    Raises:
        ProviderNotFoundError: No entry with this id, or its type is unknown.
        ConfigError: The entry's stored config is invalid for its type.
    """
    registry = registry if registry is not None else get_default_registry()
    entry = registry.get_by_id(provider_id)
    if entry is None:
        raise ProviderNotFoundError(provider_id)
    return create_provider(entry.type, entry.id, entry.name, entry.config, registry=registry)


def raw_config_from_env(provider_type: str, settings: Settings | None = None) -> dict[str, Any]:
    """Build a raw provider config from the env variables its fields declare.

    Fields without an ``env`` name, or whose variable is unset, fall back to
    their declared default and are otherwise left out.
    """
    settings = settings or get_settings()
    raw: dict[str, Any] = {}
    for field in get_provider_class(provider_type).get_provider_config_fields():
        value = getattr(settings, field.env.lower(), None) if field.env else None
        if value:
            raw[field.key] = value
        elif field.default is not None:
            raw[field.key] = field.default
    return raw


def get_provider_ui_config_sections() -> list[dict[str, Any]]:
    """Describe every provider type for a configuration UI."""
    sections = []
    for provider_cls in PROVIDERS.values():
        metadata = provider_cls.get_provider_metadata()
        sections.append(
            {
                "key": metadata.key,
                "name": metadata.name,
                "fields": [
                    f.model_dump(exclude_none=True)
                    for f in provider_cls.get_provider_config_fields()
                ],
            }
        )
    return sections


__all__ = [
    "PROVIDERS",
    "BaseModelProvider",
    "OllamaConfig",
    "OllamaProvider",
    "create_configured_provider",
    "create_provider",
    "get_provider_class",
    "get_provider_ui_config_sections",
    "raw_config_from_env",
    "resolve_base_url",
]
