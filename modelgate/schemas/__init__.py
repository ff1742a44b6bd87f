"""Pydantic schemas for providers and models."""

from modelgate.schemas.provider import (
    ConfiguredModelProvider,
    Model,
    ModelList,
    ProviderMetadata,
    UIConfigField,
    UIConfigFieldOption,
)

__all__ = [
    "ConfiguredModelProvider",
    "Model",
    "ModelList",
    "ProviderMetadata",
    "UIConfigField",
    "UIConfigFieldOption",
]
