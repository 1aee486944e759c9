"""Test utilities and helper functions for Synaptic Embeddings tests."""

import asyncio
import json
import math
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union
from unittest.mock import patch


class MockResponse:
    """Stand-in for an aiohttp response used inside ``async with``."""

    def __init__(
        self, payload: Any = None, status: int = 200, body: Optional[Union[str, bytes]] = None
    ):
        self.status = status
        self._payload = payload
        self._body = body if body is not None else json.dumps(payload)

    async def json(self, content_type: Optional[str] = "application/json") -> Any:
        return json.loads(self._body)

    async def text(self, encoding: Optional[str] = None, errors: str = "strict") -> str:
        if isinstance(self._body, bytes):
            return self._body.decode(encoding or "utf-8", errors)
        return self._body

    async def __aenter__(self) -> "MockResponse":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None


class MockSession:
    """Records POST requests and replays scripted responses.

    Each scripted item is a :class:`MockResponse` or an exception instance to
    raise from the request. ``delays`` optionally sets per-call latency.
    """

    def __init__(
        self,
        responses: Sequence[Union[MockResponse, BaseException]],
        delays: Optional[Sequence[float]] = None,
    ):
        self._responses = list(responses)
        self._delays = list(delays or [])
        self.calls: List[Dict[str, Any]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> "_MockRequest":
        index = len(self.calls)
        self.calls.append({"url": url, **kwargs})
        response = self._responses[min(index, len(self._responses) - 1)]
        delay = self._delays[index] if index < len(self._delays) else 0.0
        return _MockRequest(self, response, delay)

    @property
    def payloads(self) -> List[Any]:
        return [call.get("json") for call in self.calls]

    async def close(self) -> None:
        self.closed = True

    async def __aenter__(self) -> "MockSession":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.closed = True


class _MockRequest:
    """Async context manager returned by :meth:`MockSession.post`."""

    def __init__(self, session: MockSession, response: Any, delay: float):
        self._session = session
        self._response = response
        self._delay = delay

    async def __aenter__(self) -> MockResponse:
        self._session.in_flight += 1
        self._session.max_in_flight = max(self._session.max_in_flight, self._session.in_flight)
        try:
            if self._delay:
                await asyncio.sleep(self._delay)
            if isinstance(self._response, BaseException):
                raise self._response
        finally:
            self._session.in_flight -= 1
        return self._response

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None


class EmbeddingTestHelper:
    """Helper class for embedding testing."""

    @staticmethod
    def create_mock_embedding(dimensions: int = 1024, value: float = 0.1) -> List[float]:
        """Create a mock embedding vector."""
        return [value] * dimensions

    @staticmethod
    def ollama_response(embedding: Optional[List[float]] = None, **extra: Any) -> MockResponse:
        """Create a mock Ollama ``/api/embeddings`` response."""
        if embedding is None:
            embedding = EmbeddingTestHelper.create_mock_embedding()
        return MockResponse({"embedding": embedding, **extra})

    @staticmethod
    def openai_response(
        embeddings: List[List[float]],
        model: str = "text-embedding-3-small",
        indices: Optional[List[int]] = None,
    ) -> MockResponse:
        """Create a mock OpenAI embeddings response."""
        if indices is None:
            indices = list(range(len(embeddings)))
        return MockResponse({
            "object": "list",
            "data": [
                {"object": "embedding", "index": index, "embedding": embedding}
                for index, embedding in zip(indices, embeddings)
            ],
            "model": model,
            "usage": {"prompt_tokens": len(embeddings) * 5, "total_tokens": len(embeddings) * 5},
        })

    @staticmethod
    def l2_norm(vector: Sequence[float]) -> float:
        """Compute the Euclidean length of a vector."""
        return math.sqrt(sum(value * value for value in vector))


class AssertionHelpers:
    """Helper functions for common test assertions."""

    @staticmethod
    def assert_unit_vector(vector: Sequence[float], expected_dimensions: Optional[int] = None):
        """Assert a vector is non-empty and normalized."""
        assert len(vector) > 0
        if expected_dimensions is not None:
            assert len(vector) == expected_dimensions
        assert all(isinstance(value, float) for value in vector)
        assert math.isclose(EmbeddingTestHelper.l2_norm(vector), 1.0, rel_tol=1e-9)


@contextmanager
def mock_client_session(session: MockSession) -> Iterator[MockSession]:
    """Make ``aiohttp.ClientSession()`` in the transport module return ``session``."""
    with patch(
        "synaptic_embeddings.embeddings.transport.aiohttp.ClientSession",
        return_value=session,
    ):
        yield session
