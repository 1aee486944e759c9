"""Ollama embedding service backed by a local model server."""

from typing import List, Optional

import aiohttp

from ..core.exceptions import ConfigurationError, EmbeddingError
from ..models.embedding import ModelInfo
from .base import EmbeddingService
from .transport import post_json
from .vectors import normalize_vector, validate_vector

DEFAULT_MODEL = "mxbai-embed-large"
DEFAULT_DIMENSIONS = 1024
DEFAULT_VERSION = "1.0.0"
DEFAULT_API_ENDPOINT = "http://localhost:11434/api/embeddings"
DEFAULT_TIMEOUT_SECONDS = 10.0


class OllamaEmbeddingService(EmbeddingService):
    """Generates embeddings with Ollama's ``/api/embeddings`` endpoint.

    The endpoint takes one prompt per request, so batches are embedded one
    text at a time. Reachability of the endpoint is only discovered when a
    request is made.
    """

    def __init__(
        self,
        api_endpoint: Optional[str] = None,
        model: Optional[str] = None,
        dimensions: Optional[int] = None,
        version: Optional[str] = None,
        timeout: Optional[float] = None,
        batch_concurrency: Optional[int] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.model = model or DEFAULT_MODEL
        self.dimensions = dimensions or DEFAULT_DIMENSIONS
        self.version = version or DEFAULT_VERSION
        self.api_endpoint = api_endpoint or DEFAULT_API_ENDPOINT
        self.timeout = timeout or DEFAULT_TIMEOUT_SECONDS
        self.batch_concurrency = batch_concurrency or 1
        self._session = session

        if self.dimensions < 0:
            raise ConfigurationError("Embedding dimensions must be positive", "dimensions")

        self._model_info = ModelInfo(
            name=self.model, dimensions=self.dimensions, version=self.version
        )

    @property
    def provider_name(self) -> str:
        return "ollama"

    async def generate_embedding(self, text: str) -> List[float]:
        """Generate an embedding for a single text."""
        self.logger.debug(
            "Generating embedding",
            text=text[:50] + "...",
            model=self.model,
            api_endpoint=self.api_endpoint,
        )

        try:
            data = await post_json(
                self.api_endpoint,
                {"prompt": text, "model": self.model},
                source="Ollama API",
                timeout_seconds=self.timeout,
                session=self._session,
            )
            raw = data.get("embedding") if isinstance(data, dict) else None
            embedding = validate_vector(raw, "Ollama API")
        except EmbeddingError as e:
            self.logger.error("Failed to generate embedding", error=str(e))
            raise
        except Exception as e:
            self.logger.error("Failed to generate embedding", error=str(e))
            raise EmbeddingError(f"Error generating embedding: {e}") from e

        if len(embedding) != self.dimensions:
            self.logger.warning(
                "Embedding length differs from declared dimensions",
                length=len(embedding),
                dimensions=self.dimensions,
            )

        normalize_vector(embedding)
        self.logger.debug("Normalized embedding", length=len(embedding), sample=embedding[:5])

        return embedding

    def get_model_info(self) -> ModelInfo:
        """Get information about the embedding model."""
        return self._model_info
