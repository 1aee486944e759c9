"""Embedding domain models for Synaptic Embeddings."""

from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field

from .base import SynapticBaseModel


class ModelInfo(SynapticBaseModel):
    """Describes the vectors produced by one embedding service instance."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the embedding model")
    dimensions: int = Field(gt=0, description="Embedding vector dimensions")
    version: str = Field(description="Model or provider version")


class ServiceConfig(SynapticBaseModel):
    """Options used to select and construct an embedding service.

    Recognised fields are typed; anything else is kept as a provider-specific
    extension and can be read back through :meth:`extra`.
    """

    model_config = ConfigDict(extra="allow")

    provider: Optional[str] = Field(
        default=None,
        description="Registered provider name (case-insensitive)"
    )
    model: Optional[str] = Field(
        default=None,
        description="Provider-specific model identifier"
    )
    dimensions: Optional[int] = Field(
        default=None,
        gt=0,
        description="Declared embedding dimensions"
    )
    api_key: Optional[str] = Field(
        default=None,
        alias="apiKey",
        description="Credential for providers that require one",
        repr=False,
    )
    api_endpoint: Optional[str] = Field(
        default=None,
        alias="apiEndpoint",
        description="Network target for the provider"
    )

    def extra(self, key: str, default: Any = None) -> Any:
        """Get a provider-specific extension field."""
        extras: Dict[str, Any] = self.model_extra or {}
        value = extras.get(key)
        return default if value is None else value
