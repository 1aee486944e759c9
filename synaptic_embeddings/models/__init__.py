"""Synaptic Embeddings domain models."""

from .base import SynapticBaseModel
from .embedding import ModelInfo, ServiceConfig

__all__ = [
    "SynapticBaseModel",
    "ModelInfo",
    "ServiceConfig",
]
