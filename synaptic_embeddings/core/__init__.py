"""Core error types for Synaptic Embeddings."""

from .exceptions import (
    ConfigurationError,
    EmbeddingAPIStatusError,
    EmbeddingError,
    EmbeddingTransportError,
    InvalidEmbeddingResponseError,
    ProviderNotRegisteredError,
    SynapticError,
)

__all__ = [
    "SynapticError",
    "ConfigurationError",
    "EmbeddingError",
    "ProviderNotRegisteredError",
    "EmbeddingTransportError",
    "EmbeddingAPIStatusError",
    "InvalidEmbeddingResponseError",
]
