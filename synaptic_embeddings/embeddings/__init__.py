"""
Embedding generation behind one provider-agnostic contract.

Providers:

- **default**: synthetic, deterministic unit vectors; no network access
- **openai**: OpenAI-compatible hosted embeddings API (requires an API key)
- **ollama**: local Ollama model server

Architecture:
- EmbeddingService: abstract contract every provider implements
- EmbeddingServiceFactory: registry resolving provider names to constructors
- normalize_vector: unit-length post-processing shared by all providers

Every vector handed back to callers is normalized to unit L2 length, and
failures surface as EmbeddingError subclasses rather than placeholder vectors.
``create_from_environment`` is the one entry point that recovers from errors,
by falling back to the synthetic provider.
"""

from .base import EmbeddingService
from .default import DefaultEmbeddingService
from .factory import (
    EmbeddingServiceFactory,
    create_default_service,
    create_from_environment,
    create_openai_service,
    create_service,
    default_factory,
    get_available_providers,
    register_builtin_providers,
    register_provider,
    reset_registry,
)
from .ollama import OllamaEmbeddingService
from .openai import OpenAIEmbeddingService
from .vectors import normalize_vector, validate_vector

__all__ = [
    "EmbeddingService",
    "DefaultEmbeddingService",
    "OpenAIEmbeddingService",
    "OllamaEmbeddingService",
    "EmbeddingServiceFactory",
    "default_factory",
    "register_builtin_providers",
    "register_provider",
    "reset_registry",
    "get_available_providers",
    "create_service",
    "create_from_environment",
    "create_openai_service",
    "create_default_service",
    "normalize_vector",
    "validate_vector",
]
