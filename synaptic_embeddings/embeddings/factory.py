"""Provider registry and factory for embedding services.

Providers are registered under a lowercase name together with a constructor
taking a :class:`ServiceConfig`. :class:`EmbeddingServiceFactory` is an
explicit registry value; ``default_factory`` carries the built-in providers
and backs the module-level helpers. Registration is expected to happen at
start-up, but every access to the registry is serialized by a lock.
"""

import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..core.exceptions import ConfigurationError, ProviderNotRegisteredError
from ..models.embedding import ServiceConfig
from .base import EmbeddingService
from .default import DefaultEmbeddingService
from .ollama import OllamaEmbeddingService
from .openai import OpenAIEmbeddingService

DEFAULT_PROVIDER = "default"

ProviderFactory = Callable[[ServiceConfig], EmbeddingService]
ConfigLike = Union[ServiceConfig, Mapping[str, Any], None]


def _coerce_config(config: ConfigLike) -> ServiceConfig:
    """Turn a mapping (or nothing) into a validated ServiceConfig."""
    if isinstance(config, ServiceConfig):
        return config
    try:
        return ServiceConfig.model_validate(dict(config or {}))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid embedding service configuration: {e}") from e


class EmbeddingServiceFactory(LoggerMixin):
    """Registry mapping provider names to embedding service constructors."""

    def __init__(self) -> None:
        self._providers: Dict[str, ProviderFactory] = {}
        self._lock = threading.RLock()

    def register_provider(self, name: str, provider: ProviderFactory) -> None:
        """Register (or replace) a provider under ``name``, case-insensitively."""
        with self._lock:
            self._providers[name.lower()] = provider
        self.logger.debug("Embedding provider registered", provider=name.lower())

    def reset_registry(self) -> None:
        """Remove every registered provider, built-ins included."""
        with self._lock:
            self._providers = {}

    def get_available_providers(self) -> List[str]:
        """Get registered provider names in registration order."""
        with self._lock:
            return list(self._providers)

    def create_service(self, config: ConfigLike = None) -> EmbeddingService:
        """Create a service using a registered provider.

        Raises:
            ProviderNotRegisteredError: no provider is registered under the name.
            ConfigurationError: ``config`` is a mapping that fails validation.

        Errors raised by the provider constructor propagate unchanged.
        """
        service_config = _coerce_config(config)
        provider_name = (service_config.provider or DEFAULT_PROVIDER).lower()
        self.logger.debug("Creating embedding service", provider=provider_name)

        with self._lock:
            provider_fn = self._providers.get(provider_name)

        if provider_fn is None:
            self.logger.error("Embedding provider is not registered", provider=provider_name)
            raise ProviderNotRegisteredError(provider_name)

        try:
            service = provider_fn(service_config)
        except Exception as e:
            self.logger.error(
                "Failed to create embedding service",
                provider=provider_name,
                error=str(e),
            )
            raise

        self.logger.debug(
            "Embedding service created",
            provider=provider_name,
            service=type(service).__name__,
        )
        return service

    def create_from_environment(self, settings: Optional[Settings] = None) -> EmbeddingService:
        """Create an embedding service from settings, never failing.

        When ``settings`` is omitted they are loaded from the environment.
        ``MOCK_EMBEDDINGS`` forces the synthetic provider; any error while
        loading settings or creating the configured provider falls back to it.
        """
        provider_name = DEFAULT_PROVIDER
        try:
            if settings is None:
                settings = Settings()

            self.logger.debug(
                "Creating embedding service from environment",
                mock_embeddings=settings.MOCK_EMBEDDINGS,
                embedding_provider=settings.EMBEDDING_PROVIDER,
            )

            if settings.MOCK_EMBEDDINGS:
                self.logger.info("Using mock embeddings for testing")
                return DefaultEmbeddingService()

            provider_name = settings.EMBEDDING_PROVIDER
            service = self.create_service(settings.to_service_config())
            model_info = service.get_model_info()

        except Exception as e:
            self.logger.error(
                "Failed to create embedding service from environment",
                provider=provider_name,
                error=str(e),
            )
            self.logger.info("Falling back to default embedding service")
            return DefaultEmbeddingService()

        self.logger.info(
            "Embedding service created from environment",
            provider=provider_name,
            model=model_info.name,
            dimensions=model_info.dimensions,
        )
        return service

    def create_openai_service(
        self,
        api_key: str,
        model: Optional[str] = None,
        dimensions: Optional[int] = None,
        api_endpoint: Optional[str] = None,
    ) -> EmbeddingService:
        """Create an OpenAI embedding service."""
        return OpenAIEmbeddingService(
            api_key=api_key,
            model=model,
            dimensions=dimensions,
            api_endpoint=api_endpoint,
        )

    def create_default_service(self, dimensions: Optional[int] = None) -> EmbeddingService:
        """Create a synthetic embedding service."""
        return DefaultEmbeddingService(dimensions)


def _create_default(config: ServiceConfig) -> EmbeddingService:
    return DefaultEmbeddingService(
        dimensions=config.dimensions,
        version=config.extra("version"),
    )


def _create_openai(config: ServiceConfig) -> EmbeddingService:
    if not config.api_key:
        raise ConfigurationError("API key is required for OpenAI embedding service", "api_key")

    return OpenAIEmbeddingService(
        api_key=config.api_key,
        model=config.model,
        dimensions=config.dimensions,
        version=config.extra("version"),
        api_endpoint=config.api_endpoint,
        timeout=config.extra("timeout"),
    )


def _create_ollama(config: ServiceConfig) -> EmbeddingService:
    return OllamaEmbeddingService(
        api_endpoint=config.api_endpoint,
        model=config.model,
        dimensions=config.dimensions,
        version=config.extra("version"),
        timeout=config.extra("timeout"),
        batch_concurrency=config.extra("batch_concurrency"),
    )


def register_builtin_providers(factory: EmbeddingServiceFactory) -> EmbeddingServiceFactory:
    """Register the default, openai and ollama providers on ``factory``."""
    factory.register_provider("default", _create_default)
    factory.register_provider("openai", _create_openai)
    factory.register_provider("ollama", _create_ollama)
    return factory


default_factory = register_builtin_providers(EmbeddingServiceFactory())


def register_provider(name: str, provider: ProviderFactory) -> None:
    """Register a provider on the shared factory."""
    default_factory.register_provider(name, provider)


def reset_registry() -> None:
    """Clear the shared factory; used primarily for testing."""
    default_factory.reset_registry()


def get_available_providers() -> List[str]:
    """Get the provider names registered on the shared factory."""
    return default_factory.get_available_providers()


def create_service(config: ConfigLike = None) -> EmbeddingService:
    """Create a service from the shared factory."""
    return default_factory.create_service(config)


def create_from_environment(settings: Optional[Settings] = None) -> EmbeddingService:
    """Create a service from settings with the shared factory, never failing."""
    return default_factory.create_from_environment(settings)


def create_openai_service(
    api_key: str,
    model: Optional[str] = None,
    dimensions: Optional[int] = None,
    api_endpoint: Optional[str] = None,
) -> EmbeddingService:
    """Create an OpenAI embedding service."""
    return default_factory.create_openai_service(api_key, model, dimensions, api_endpoint)


def create_default_service(dimensions: Optional[int] = None) -> EmbeddingService:
    """Create a synthetic embedding service."""
    return default_factory.create_default_service(dimensions)
