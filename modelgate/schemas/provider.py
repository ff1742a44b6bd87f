"""Pydantic schemas shared by model providers."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class Model(BaseModel):
    """A model offered by a provider."""

    name: str = Field(..., description="Display label", examples=["Llama 3"])
    key: str = Field(
        ...,
        description="Catalog identifier used for lookups and instantiation",
        examples=["llama3:8b"],
    )


class ModelList(BaseModel):
    """Chat and embedding candidates of a provider.

    Both lists may hold the same key more than once when it comes from
    several sources.
    """

    chat: list[Model] = Field(default_factory=list)
    embedding: list[Model] = Field(default_factory=list)


class ProviderMetadata(BaseModel):
    """Identity of a provider type in the provider registry."""

    key: str = Field(..., examples=["ollama"])
    name: str = Field(..., examples=["Ollama"])


class UIConfigFieldOption(BaseModel):
    """One choice of a select field."""

    name: str
    value: str


class UIConfigField(BaseModel):
    """Descriptor of a provider configuration field, rendered by a config UI."""

    type: Literal["select", "string"]
    name: str
    key: str
    description: str
    required: bool = False
    default: str | None = None
    options: list[UIConfigFieldOption] | None = None
    placeholder: str | None = None
    env: str | None = None
    scope: Literal["client", "server"] = "server"


class ConfiguredModelProvider(BaseModel):
    """A provider instance as configured by the user."""

    id: str = Field(..., description="Provider instance id")
    name: str = Field(..., description="Human-readable name", examples=["Local Ollama"])
    type: str = Field(..., description="Provider type key", examples=["ollama"])
    config: dict[str, Any] = Field(default_factory=dict, description="Raw provider config")
    chat_models: list[Model] = Field(
        default_factory=list,
        description="Chat models added by the user on top of the remote catalog",
    )
    embedding_models: list[Model] = Field(
        default_factory=list,
        description="Embedding models added by the user on top of the remote catalog",
    )
