"""
Synaptic Embeddings - pluggable embedding generation for knowledge-graph memory.

This package provides:
- A provider-agnostic async embedding contract
- A provider registry with environment-driven selection and safe fallback
- Local (Ollama), hosted (OpenAI) and synthetic providers
- Unit-length vector normalization
"""

__version__ = "0.1.0"
__author__ = "Synaptic Team"

from .config.settings import Settings
from .embeddings import (
    EmbeddingService,
    EmbeddingServiceFactory,
    create_default_service,
    create_from_environment,
    create_openai_service,
    create_service,
    get_available_providers,
    register_provider,
    reset_registry,
)
from .models.embedding import ModelInfo, ServiceConfig

__all__ = [
    "Settings",
    "EmbeddingService",
    "EmbeddingServiceFactory",
    "ModelInfo",
    "ServiceConfig",
    "register_provider",
    "reset_registry",
    "get_available_providers",
    "create_service",
    "create_from_environment",
    "create_openai_service",
    "create_default_service",
]
