"""Base model classes for Synaptic Embeddings."""

from pydantic import BaseModel, ConfigDict


class SynapticBaseModel(BaseModel):
    """Base model with common configuration for all Synaptic Embeddings models."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
        # Include extra validation info in errors
        extra='forbid',
    )
