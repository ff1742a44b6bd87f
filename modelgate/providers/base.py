"""Base contract shared by all model providers."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from modelgate.core.registry import ConfiguredProviderRegistry, get_default_registry
from modelgate.llm.base import BaseEmbedding, BaseLLM
from modelgate.schemas.provider import ModelList, ProviderMetadata, UIConfigField

ConfigT = TypeVar("ConfigT")


class BaseModelProvider(ABC, Generic[ConfigT]):
    """A provider instance that lists and instantiates models from one backend.

    Subclasses implement the instance operations against their backend and the
    class-level hooks used by the provider registry and the configuration UI.
    """

    def __init__(
        self,
        id: str,
        name: str,
        config: ConfigT,
        registry: ConfiguredProviderRegistry | None = None,
    ) -> None:
        """Initialize a provider instance.

        Args:
            id: Provider instance id, used to look up user-configured models.
            name: Human-readable name.
            config: Validated provider config (see ``parse_and_validate``).
            registry: Configured provider registry. Defaults to the process-wide one.
        """
        self.id = id
        self.name = name
        self.config = config
        self.registry = registry if registry is not None else get_default_registry()

    @abstractmethod
    async def get_default_models(self) -> ModelList:
        """Return the models the backend itself advertises."""

    @abstractmethod
    async def get_model_list(self) -> ModelList:
        """Return backend models followed by user-configured ones."""

    @abstractmethod
    async def load_chat_model(self, key: str) -> BaseLLM[Any]:
        ...

    @abstractmethod
    async def load_embedding_model(self, key: str) -> BaseEmbedding[Any]:
        ...

    @classmethod
    @abstractmethod
    def parse_and_validate(cls, raw: Any) -> ConfigT:
        """Convert untrusted raw config into a validated config.

        Raises:
            ConfigError: If the raw config is invalid.
        """

    @classmethod
    @abstractmethod
    def get_provider_config_fields(cls) -> list[UIConfigField]:
        ...

    @classmethod
    @abstractmethod
    def get_provider_metadata(cls) -> ProviderMetadata:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"
