"""Abstract base class for embedding services."""

from abc import ABC, abstractmethod
from typing import List

from ..config.logging import LoggerMixin
from ..models.embedding import ModelInfo
from ..utils.async_utils import gather_with_concurrency


class EmbeddingService(ABC, LoggerMixin):
    """Contract shared by every embedding provider.

    Vectors returned by any method are already normalized to unit length.
    Failures raise :class:`~synaptic_embeddings.core.exceptions.EmbeddingError`
    (or a subclass); an empty or malformed vector is never returned.
    """

    #: Maximum in-flight requests used by the default ``generate_embeddings``.
    batch_concurrency: int = 1

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the registry name of this provider."""
        pass

    @abstractmethod
    async def generate_embedding(self, text: str) -> List[float]:
        """Generate a normalized embedding for a single text."""
        pass

    @abstractmethod
    def get_model_info(self) -> ModelInfo:
        """Get information about the embedding model."""
        pass

    async def generate_embeddings(self, texts: List[str]) -> List[List[float]]:
        """Generate embeddings for multiple texts, in input order.

        Texts are embedded one at a time unless ``batch_concurrency`` is
        raised. Any failure aborts the whole call.
        """
        if not texts:
            return []

        if self.batch_concurrency <= 1:
            embeddings: List[List[float]] = []
            for text in texts:
                embeddings.append(await self.generate_embedding(text))
            return embeddings

        return await gather_with_concurrency(
            [self.generate_embedding(text) for text in texts],
            max_concurrency=self.batch_concurrency,
        )
