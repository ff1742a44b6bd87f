"""Base contracts for chat and embedding model clients."""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Generic, List, TypeVar

ConfigT = TypeVar("ConfigT")


class BaseLLM(ABC, Generic[ConfigT]):
    """A chat model bound to one provider endpoint and model key."""

    def __init__(self, config: ConfigT):
        self.config = config

    @abstractmethod
    async def generate_text(self, messages: List[Dict[str, str]], **options: Any) -> str:
        """Return the assistant reply for a list of chat messages."""

    @abstractmethod
    def stream_text(
        self, messages: List[Dict[str, str]], **options: Any
    ) -> AsyncIterator[str]:
        """Yield the assistant reply as content deltas."""


class BaseEmbedding(ABC, Generic[ConfigT]):
    """An embedding model bound to one provider endpoint and model key."""

    def __init__(self, config: ConfigT):
        self.config = config

    @abstractmethod
    async def embed_text(self, texts: List[str]) -> List[List[float]]:
        """Return one vector per input text, in input order."""
