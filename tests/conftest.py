"""Pytest configuration and shared fixtures for Synaptic Embeddings tests."""

from typing import Generator

import pytest

from synaptic_embeddings.config.settings import Settings
from synaptic_embeddings.embeddings import factory as factory_module
from synaptic_embeddings.embeddings.factory import (
    EmbeddingServiceFactory,
    register_builtin_providers,
)

ENVIRONMENT_VARIABLES = [
    "EMBEDDING_PROVIDER",
    "EMBEDDING_MODEL",
    "EMBEDDING_DIMENSIONS",
    "EMBEDDING_API_KEY",
    "OPENAI_API_KEY",
    "EMBEDDING_API_ENDPOINT",
    "OLLAMA_API_ENDPOINT",
    "EMBEDDING_REQUEST_TIMEOUT",
    "EMBEDDING_BATCH_CONCURRENCY",
    "MOCK_EMBEDDINGS",
    "LOG_LEVEL",
    "LOG_FILE",
    "DEBUG",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate tests from the developer's environment and .env file."""
    for name in ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_default_registry() -> Generator[None, None, None]:
    """Rebuild the shared registry after tests that mutate it."""
    yield
    factory_module.default_factory.reset_registry()
    register_builtin_providers(factory_module.default_factory)


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings that ignore any .env file."""
    return Settings(
        _env_file=None,
        EMBEDDING_PROVIDER="default",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def embedding_factory() -> EmbeddingServiceFactory:
    """A private factory with the built-in providers registered."""
    return register_builtin_providers(EmbeddingServiceFactory())


@pytest.fixture
def empty_factory() -> EmbeddingServiceFactory:
    """A private factory with nothing registered."""
    return EmbeddingServiceFactory()
