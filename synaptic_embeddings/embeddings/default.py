"""Synthetic embedding service that needs no network access."""

import hashlib
from typing import List, Optional

import numpy as np

from ..core.exceptions import ConfigurationError
from ..models.embedding import ModelInfo
from .base import EmbeddingService
from .vectors import normalize_vector

DEFAULT_DIMENSIONS = 1536
DEFAULT_MODEL = "synaptic-synthetic"
DEFAULT_VERSION = "1.0.0"


class DefaultEmbeddingService(EmbeddingService):
    """Produces pseudo-random unit vectors seeded from the text.

    The same text always maps to the same vector, which keeps tests and
    offline runs deterministic. The vectors carry no semantic meaning.
    """

    def __init__(
        self,
        dimensions: Optional[int] = None,
        model: Optional[str] = None,
        version: Optional[str] = None,
    ):
        if dimensions is None:
            dimensions = DEFAULT_DIMENSIONS
        if dimensions <= 0:
            raise ConfigurationError("Embedding dimensions must be positive", "dimensions")

        self._model_info = ModelInfo(
            name=model or DEFAULT_MODEL,
            dimensions=dimensions,
            version=version or DEFAULT_VERSION,
        )

    @property
    def provider_name(self) -> str:
        return "default"

    async def generate_embedding(self, text: str) -> List[float]:
        """Generate a deterministic synthetic embedding for a single text."""
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        rng = np.random.default_rng(int.from_bytes(digest[:8], "big"))
        embedding = rng.standard_normal(self._model_info.dimensions).tolist()
        return normalize_vector(embedding)

    def get_model_info(self) -> ModelInfo:
        """Get information about the embedding model."""
        return self._model_info
