"""Tests for the EmbeddingService contract defaults."""

import asyncio
from typing import List

import pytest

from synaptic_embeddings.core.exceptions import EmbeddingError
from synaptic_embeddings.embeddings.base import EmbeddingService
from synaptic_embeddings.models.embedding import ModelInfo


class RecordingService(EmbeddingService):
    """Embeds text as [len(text), 1] after a per-text delay."""

    def __init__(self, delays=None, fail_on=None, batch_concurrency=1):
        self.delays = delays or {}
        self.fail_on = fail_on
        self.batch_concurrency = batch_concurrency
        self.started: List[str] = []
        self.finished: List[str] = []

    @property
    def provider_name(self) -> str:
        return "recording"

    async def generate_embedding(self, text: str) -> List[float]:
        self.started.append(text)
        await asyncio.sleep(self.delays.get(text, 0))
        if text == self.fail_on:
            raise EmbeddingError(f"cannot embed {text}")
        self.finished.append(text)
        return [float(len(text)), 1.0]

    def get_model_info(self) -> ModelInfo:
        return ModelInfo(name="recording", dimensions=2, version="0")


class TestEmbeddingServiceContract:
    """Test the default batch behaviour."""

    def test_abstract(self):
        """The contract cannot be instantiated directly."""
        with pytest.raises(TypeError):
            EmbeddingService()

    async def test_sequential_by_default(self):
        """Each text starts only after the previous one finished."""
        service = RecordingService(delays={"a": 0.03, "bb": 0.0, "ccc": 0.01})

        embeddings = await service.generate_embeddings(["a", "bb", "ccc"])

        assert service.started == ["a", "bb", "ccc"]
        assert service.finished == ["a", "bb", "ccc"]
        assert embeddings == [[1.0, 1.0], [2.0, 1.0], [3.0, 1.0]]

    async def test_failure_aborts_without_partial_results(self):
        """A failing item raises and later items are never attempted."""
        service = RecordingService(fail_on="bb")

        with pytest.raises(EmbeddingError, match="cannot embed bb"):
            await service.generate_embeddings(["a", "bb", "ccc"])

        assert service.started == ["a", "bb"]

    async def test_concurrent_preserves_order(self):
        """Bounded fan-out returns results in input order."""
        service = RecordingService(
            delays={"a": 0.05, "bb": 0.0, "ccc": 0.02},
            batch_concurrency=3,
        )

        embeddings = await service.generate_embeddings(["a", "bb", "ccc"])

        assert service.finished == ["bb", "ccc", "a"]
        assert embeddings == [[1.0, 1.0], [2.0, 1.0], [3.0, 1.0]]

    async def test_empty_input(self):
        """No texts gives no vectors."""
        assert await RecordingService().generate_embeddings([]) == []
