"""
Ollama chat and embedding clients backed by LiteLLM.

Both clients talk to either a self-hosted Ollama server or Ollama Cloud.
The API key is only sent when one is configured.
"""

import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, List, Optional

import litellm
from litellm import acompletion, aembedding

from modelgate.llm.base import BaseEmbedding, BaseLLM

logger = logging.getLogger(__name__)

# LiteLLM routes "ollama_chat/" to /api/chat and "ollama/" embeddings to /api/embed
CHAT_MODEL_PREFIX = "ollama_chat/"
EMBEDDING_MODEL_PREFIX = "ollama/"


@dataclass(frozen=True)
class OllamaClientConfig:
    """Endpoint and model a client is bound to."""

    base_url: str
    model: str
    api_key: Optional[str] = None


def _connection_kwargs(config: OllamaClientConfig) -> Dict[str, Any]:
    # Omit api_key for local servers that don't expect auth
    kwargs: Dict[str, Any] = {"api_base": config.base_url}
    if config.api_key:
        kwargs["api_key"] = config.api_key
    return kwargs


def _index_of(item: Any) -> int:
    if isinstance(item, dict):
        return item.get("index", 0)
    return getattr(item, "index", 0)


def _embedding_vector(item: Any) -> List[float]:
    if isinstance(item, dict):
        return item["embedding"]
    return item.embedding


class OllamaLLM(BaseLLM[OllamaClientConfig]):
    """
    Chat model served by Ollama.

    Usage:
        llm = OllamaLLM(OllamaClientConfig(base_url="http://localhost:11434", model="llama3"))
        reply = await llm.generate_text([{"role": "user", "content": "Hello"}])
    """

    def __init__(self, config: OllamaClientConfig):
        super().__init__(config)
        litellm.suppress_debug_info = True

    @property
    def litellm_model(self) -> str:
        return f"{CHAT_MODEL_PREFIX}{self.config.model}"

    async def generate_text(self, messages: List[Dict[str, str]], **options: Any) -> str:
        """
        Execute a non-streaming chat completion.

        Args:
            messages: List of message dicts with "role" and "content"
            **options: Additional arguments passed to litellm.acompletion

        Returns:
            Content of the first choice, or an empty string if the model returned none
        """
        try:
            response = await acompletion(
                model=self.litellm_model,
                messages=messages,
                stream=False,
                **_connection_kwargs(self.config),
                **options,
            )
        except Exception as e:
            logger.error(f"Completion failed for Ollama model {self.config.model}: {e}")
            raise

        content = response.choices[0].message.content
        return content or ""

    async def stream_text(
        self, messages: List[Dict[str, str]], **options: Any
    ) -> AsyncIterator[str]:
        """Execute a streaming chat completion, yielding non-empty content deltas."""
        try:
            response = await acompletion(
                model=self.litellm_model,
                messages=messages,
                stream=True,
                **_connection_kwargs(self.config),
                **options,
            )
            async for chunk in response:
                delta = chunk.choices[0].delta.content
                if delta:
                    yield delta
        except Exception as e:
            logger.error(f"Streaming failed for Ollama model {self.config.model}: {e}")
            raise

        logger.debug(f"Streaming completed for Ollama model {self.config.model}")


class OllamaEmbedding(BaseEmbedding[OllamaClientConfig]):
    """Embedding model served by Ollama."""

    def __init__(self, config: OllamaClientConfig):
        super().__init__(config)
        litellm.suppress_debug_info = True

    @property
    def litellm_model(self) -> str:
        return f"{EMBEDDING_MODEL_PREFIX}{self.config.model}"

    async def embed_text(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []

        try:
            response = await aembedding(
                model=self.litellm_model,
                input=texts,
                **_connection_kwargs(self.config),
            )
        except Exception as e:
            logger.error(f"Embedding failed for Ollama model {self.config.model}: {e}")
            raise

        items = sorted(response.data, key=_index_of)
        return [_embedding_vector(item) for item in items]

    async def embed_chunks(self, chunks: List[str]) -> List[List[float]]:
        return await self.embed_text(chunks)
