"""Model clients constructed by providers."""

from modelgate.llm.base import BaseEmbedding, BaseLLM
from modelgate.llm.ollama import OllamaClientConfig, OllamaEmbedding, OllamaLLM

__all__ = [
    "BaseEmbedding",
    "BaseLLM",
    "OllamaClientConfig",
    "OllamaEmbedding",
    "OllamaLLM",
]
