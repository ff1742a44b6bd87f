"""Registry of configured provider instances.

Holds the models a user has added by hand to each provider instance. These
are merged with the provider's remote catalog when listing models.
"""

import logging
from typing import Literal

from modelgate.exceptions import ConfigError, ProviderNotFoundError
from modelgate.schemas.provider import ConfiguredModelProvider, Model

logger = logging.getLogger(__name__)

ModelKind = Literal["chat", "embedding"]


class ConfiguredProviderRegistry:
    """In-memory map of provider instance id to its configuration."""

    def __init__(self) -> None:
        self._providers: dict[str, ConfiguredModelProvider] = {}

    def register(self, provider: ConfiguredModelProvider) -> None:
        """Add or replace a configured provider.

        The registry keeps its own copy, so later model edits never touch the
        caller's object.
        """
        if provider.id in self._providers:
            logger.debug("Replacing configured provider %s", provider.id)
        self._providers[provider.id] = provider.model_copy(deep=True)

    def get_by_id(self, provider_id: str) -> ConfiguredModelProvider | None:
        return self._providers.get(provider_id)

    def remove(self, provider_id: str) -> ConfiguredModelProvider:
        try:
            return self._providers.pop(provider_id)
        except KeyError:
            raise ProviderNotFoundError(provider_id) from None

    def list_providers(self) -> list[ConfiguredModelProvider]:
        return list(self._providers.values())

    def add_model(self, provider_id: str, kind: str, model: Model) -> None:
        """Append a user-configured model to a provider.

        Args:
            provider_id: Provider instance id.
            kind: "chat" or "embedding".
            model: Model to append. Duplicates are kept.

        Raises:
            ProviderNotFoundError: No provider with this id.
            ConfigError: Unknown model kind.
        """
        self._models_for(provider_id, kind).append(model)

    def remove_model(self, provider_id: str, kind: str, key: str) -> None:
        """Remove every user-configured model with the given key."""
        models = self._models_for(provider_id, kind)
        models[:] = [m for m in models if m.key != key]

    def clear(self) -> None:
        self._providers.clear()

    def _models_for(self, provider_id: str, kind: str) -> list[Model]:
        provider = self._providers.get(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id)
        if kind == "chat":
            return provider.chat_models
        if kind == "embedding":
            return provider.embedding_models
        raise ConfigError(f'Invalid model kind "{kind}". Must be "chat" or "embedding"')


_default_registry = ConfiguredProviderRegistry()


def get_default_registry() -> ConfiguredProviderRegistry:
    """Return the process-wide configured provider registry."""
    return _default_registry


def get_configured_model_provider_by_id(provider_id: str) -> ConfiguredModelProvider | None:
    return _default_registry.get_by_id(provider_id)
