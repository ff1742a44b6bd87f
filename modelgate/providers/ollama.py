"""Ollama model provider.

Lists models through Ollama's /api/tags endpoint, on a self-hosted server
(local mode) or on Ollama Cloud (cloud mode), and builds chat and embedding
clients for them.
Ref: https://docs.ollama.com/api/tags
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

import httpx

from modelgate.core.config import get_settings
from modelgate.exceptions import (
    ConfigError,
    ModelNotFoundError,
    ProviderConnectionError,
    ProviderNotFoundError,
)
from modelgate.llm.ollama import OllamaClientConfig, OllamaEmbedding, OllamaLLM
from modelgate.providers.base import BaseModelProvider
from modelgate.schemas.provider import (
    Model,
    ModelList,
    ProviderMetadata,
    UIConfigField,
    UIConfigFieldOption,
)

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DOCKER_OLLAMA_URL = "http://host.docker.internal:11434"
OLLAMA_CLOUD_URL = "https://ollama.com"

OllamaMode = Literal["local", "cloud"]


@dataclass(frozen=True)
class OllamaConfig:
    """Validated Ollama provider configuration."""

    mode: OllamaMode = "local"
    base_url: str | None = None  # Only used in local mode
    api_key: str | None = None  # Always set in cloud mode


def resolve_base_url(config: OllamaConfig) -> str:
    """Return the server URL every request of this config goes to."""
    if config.mode == "cloud":
        return OLLAMA_CLOUD_URL
    return config.base_url or DEFAULT_OLLAMA_URL


class OllamaProvider(BaseModelProvider[OllamaConfig]):
    """Provider for Ollama, self-hosted or cloud.

    The remote catalog does not tell chat and embedding models apart, so every
    listed model is offered as both.
    """

    async def get_default_models(self) -> ModelList:
        """Fetch the models available on the Ollama server.

        Returns:
            The same catalog models as chat and embedding candidates.

        Raises:
            ProviderConnectionError: The server could not be reached.
            httpx.HTTPStatusError: The server answered with a non-2xx status.
        """
        base_url = resolve_base_url(self.config)

        headers = {"Content-type": "application/json"}
        if self.config.mode == "cloud" and self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{base_url.rstrip('/')}/api/tags",
                    headers=headers,
                )
        except (httpx.TransportError, httpx.InvalidURL) as e:
            logger.warning(
                "Cannot connect to Ollama at %s - server may not be running: %s",
                base_url,
                str(e),
            )
            raise ProviderConnectionError(
                f"Error connecting to Ollama API at {base_url}. Please ensure the base URL "
                "is correct and the Ollama server is running.",
                base_url=base_url,
            ) from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "HTTP error listing Ollama models: %s %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "",
            )
            raise

        data = response.json()
        models = [Model(name=m["name"], key=m["model"]) for m in data["models"]]

        logger.info("Discovered %d models from Ollama at %s", len(models), base_url)
        return ModelList(chat=models, embedding=list(models))

    async def get_model_list(self) -> ModelList:
        default_models = await self.get_default_models()

        configured = self.registry.get_by_id(self.id)
        if configured is None:
            raise ProviderNotFoundError(self.id)

        logger.debug(
            "Merging %d chat and %d embedding configured models into provider %s",
            len(configured.chat_models),
            len(configured.embedding_models),
            self.id,
        )
        return ModelList(
            chat=[*default_models.chat, *configured.chat_models],
            embedding=[*default_models.embedding, *configured.embedding_models],
        )

    async def load_chat_model(self, key: str) -> OllamaLLM:
        model_list = await self.get_model_list()

        if not any(m.key == key for m in model_list.chat):
            raise ModelNotFoundError(
                "Error Loading Ollama Chat Model. Invalid Model Selected",
                key=key,
                kind="chat",
            )

        return OllamaLLM(self._client_config(key))

    async def load_embedding_model(self, key: str) -> OllamaEmbedding:
        model_list = await self.get_model_list()

        if not any(m.key == key for m in model_list.embedding):
            raise ModelNotFoundError(
                "Error Loading Ollama Embedding Model. Invalid Model Selected.",
                key=key,
                kind="embedding",
            )

        return OllamaEmbedding(self._client_config(key))

    def _client_config(self, key: str) -> OllamaClientConfig:
        return OllamaClientConfig(
            base_url=resolve_base_url(self.config),
            model=key,
            api_key=self.config.api_key if self.config.mode == "cloud" else None,
        )

    @classmethod
    def parse_and_validate(cls, raw: Any) -> OllamaConfig:
        """Validate a raw config as entered in the configuration UI.

        Args:
            raw: Mapping with optional "mode", "baseURL" and "apiKey" keys.

        Returns:
            Validated OllamaConfig. Mode defaults to "local".

        Raises:
            ConfigError: Not a mapping, unknown mode, or cloud mode without an API key.
        """
        if not isinstance(raw, Mapping):
            raise ConfigError("Invalid config provided. Expected object")

        mode = raw.get("mode") or "local"
        if mode not in ("local", "cloud"):
            raise ConfigError('Invalid mode. Must be "local" or "cloud"')

        if mode == "cloud" and not raw.get("apiKey"):
            raise ConfigError(
                "API Key is required for Ollama Cloud mode. Get one at https://ollama.com"
            )

        base_url = raw.get("baseURL")
        api_key = raw.get("apiKey")
        return OllamaConfig(
            mode=mode,
            base_url=str(base_url) if base_url else None,
            api_key=str(api_key) if api_key else None,
        )

    @classmethod
    def get_provider_config_fields(cls) -> list[UIConfigField]:
        placeholder = DOCKER_OLLAMA_URL if get_settings().docker else DEFAULT_OLLAMA_URL
        return [
            UIConfigField(
                type="select",
                name="Mode",
                key="mode",
                description="Choose between Local Ollama or Ollama Cloud",
                required=True,
                default="local",
                options=[
                    UIConfigFieldOption(name="Local (Self-hosted)", value="local"),
                    UIConfigFieldOption(name="Cloud (ollama.com)", value="cloud"),
                ],
                scope="server",
            ),
            UIConfigField(
                type="string",
                name="Base URL",
                key="baseURL",
                description="Only required for Local mode",
                required=False,
                placeholder=placeholder,
                env="OLLAMA_BASE_URL",
                scope="server",
            ),
            UIConfigField(
                type="string",
                name="API Key",
                key="apiKey",
                description="Required for Cloud mode. Get one at ollama.com",
                required=False,
                placeholder="ollama_xxxxxxxxxxxxx",
                env="OLLAMA_API_KEY",
                scope="server",
            ),
        ]

    @classmethod
    def get_provider_metadata(cls) -> ProviderMetadata:
        return ProviderMetadata(key="ollama", name="Ollama")
