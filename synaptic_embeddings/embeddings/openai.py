"""OpenAI-compatible hosted embedding service."""

from typing import Any, Dict, List, Optional, Union

import aiohttp

from ..core.exceptions import (
    ConfigurationError,
    EmbeddingError,
    InvalidEmbeddingResponseError,
)
from ..models.embedding import ModelInfo
from .base import EmbeddingService
from .transport import post_json
from .vectors import normalize_vector, validate_vector

DEFAULT_MODEL = "text-embedding-3-small"
DEFAULT_DIMENSIONS = 1536
DEFAULT_VERSION = "3.0.0"
DEFAULT_API_ENDPOINT = "https://api.openai.com/v1/embeddings"
DEFAULT_TIMEOUT_SECONDS = 10.0


class OpenAIEmbeddingService(EmbeddingService):
    """Embedding service for OpenAI's ``/v1/embeddings`` API and compatibles."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        dimensions: Optional[int] = None,
        version: Optional[str] = None,
        api_endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        if not api_key:
            raise ConfigurationError(
                "API key is required for OpenAI embedding service", "api_key"
            )

        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.requested_dimensions = dimensions
        self.dimensions = dimensions or DEFAULT_DIMENSIONS
        self.version = version or DEFAULT_VERSION
        self.api_endpoint = api_endpoint or DEFAULT_API_ENDPOINT
        self.timeout = timeout or DEFAULT_TIMEOUT_SECONDS
        self._session = session

        if self.dimensions < 0:
            raise ConfigurationError("Embedding dimensions must be positive", "dimensions")

        self._model_info = ModelInfo(
            name=self.model, dimensions=self.dimensions, version=self.version
        )

    @property
    def provider_name(self) -> str:
        return "openai"

    async def generate_embedding(self, text: str) -> List[float]:
        """Generate an embedding for a single text."""
        embeddings = await self._request_embeddings(text, expected=1)
        return embeddings[0]

    async def generate_embeddings(self, texts: List[str]) -> List[List[float]]:
        """Generate embeddings for multiple texts with a single API call."""
        if not texts:
            return []
        return await self._request_embeddings(list(texts), expected=len(texts))

    def get_model_info(self) -> ModelInfo:
        """Get information about the embedding model."""
        return self._model_info

    async def _request_embeddings(
        self, texts: Union[str, List[str]], expected: int
    ) -> List[List[float]]:
        """Call the embeddings endpoint and return normalized vectors in input order."""
        self.logger.debug(
            "Requesting embeddings",
            count=expected,
            model=self.model,
            api_endpoint=self.api_endpoint,
        )

        payload: Dict[str, Any] = {"input": texts, "model": self.model}
        if self.requested_dimensions:
            payload["dimensions"] = self.requested_dimensions

        try:
            data = await post_json(
                self.api_endpoint,
                payload,
                source="OpenAI API",
                timeout_seconds=self.timeout,
                headers={"Authorization": f"Bearer {self.api_key}"},
                session=self._session,
            )
            embeddings = self._parse_response(data, expected)
        except EmbeddingError as e:
            self.logger.error("Failed to generate embeddings", count=expected, error=str(e))
            raise
        except Exception as e:
            self.logger.error("Failed to generate embeddings", count=expected, error=str(e))
            raise EmbeddingError(f"Error generating embedding: {e}") from e

        for embedding in embeddings:
            normalize_vector(embedding)

        self.logger.debug(
            "Embeddings generated",
            count=len(embeddings),
            embedding_dim=len(embeddings[0]),
        )
        return embeddings

    @staticmethod
    def _parse_response(data: Any, expected: int) -> List[List[float]]:
        """Extract and validate the vectors of an embeddings response."""
        items = data.get("data") if isinstance(data, dict) else None
        if not isinstance(items, list) or not items:
            raise InvalidEmbeddingResponseError(
                "Invalid response from OpenAI API - missing embedding data", "missing"
            )

        if len(items) != expected:
            raise InvalidEmbeddingResponseError(
                f"OpenAI API returned {len(items)} embeddings for {expected} inputs",
                "count_mismatch",
            )

        if all(isinstance(item, dict) and isinstance(item.get("index"), int) for item in items):
            items = sorted(items, key=lambda item: item["index"])

        return [
            validate_vector(item.get("embedding") if isinstance(item, dict) else None, "OpenAI API")
            for item in items
        ]
