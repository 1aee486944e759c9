"""Shared aiohttp transport for HTTP-backed embedding providers."""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import aiohttp

from ..config.logging import embeddings_logger as logger
from ..core.exceptions import (
    EmbeddingAPIStatusError,
    EmbeddingTransportError,
    InvalidEmbeddingResponseError,
)

# Error bodies are echoed into exceptions; keep them short
MAX_ERROR_BODY_CHARS = 200


def truncate_body(body: Optional[str], limit: int = MAX_ERROR_BODY_CHARS) -> str:
    """Shorten a response body for inclusion in error messages."""
    if not body:
        return ""
    return body if len(body) <= limit else body[:limit]


@asynccontextmanager
async def open_session(
    session: Optional[aiohttp.ClientSession],
    timeout: aiohttp.ClientTimeout,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Yield the injected session, or a short-lived one owned by this call."""
    if session is not None:
        yield session
        return

    async with aiohttp.ClientSession(timeout=timeout) as owned:
        yield owned


async def post_json(
    endpoint: str,
    payload: Dict[str, Any],
    *,
    source: str,
    timeout_seconds: float,
    headers: Optional[Dict[str, str]] = None,
    session: Optional[aiohttp.ClientSession] = None,
) -> Any:
    """POST ``payload`` as JSON and return the decoded JSON body.

    Raises:
        EmbeddingAPIStatusError: the endpoint answered with a non-2xx status.
        EmbeddingTransportError: the endpoint could not be reached in time.
        InvalidEmbeddingResponseError: the body could not be decoded as JSON.
    """
    request_headers = {"Content-Type": "application/json"}
    if headers:
        request_headers.update(headers)

    timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    try:
        async with open_session(session, timeout) as client:
            async with client.post(
                endpoint, json=payload, headers=request_headers, timeout=timeout
            ) as response:
                if not 200 <= response.status < 300:
                    body = truncate_body(await response.text(errors="replace"))
                    logger.error(
                        f"{source} error",
                        status=response.status,
                        endpoint=endpoint,
                        body=body,
                    )
                    details = f": {body}" if body else ""
                    raise EmbeddingAPIStatusError(
                        f"{source} error ({response.status}){details}",
                        endpoint=endpoint,
                        status_code=response.status,
                        response_body=body or None,
                    )

                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.error(f"Undecodable response from {source}", endpoint=endpoint)
                    raise InvalidEmbeddingResponseError(
                        f"Invalid response from {source} - body is not valid JSON",
                        "malformed",
                    ) from e

    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        reason = str(e) or type(e).__name__
        logger.error(f"{source} request failed", endpoint=endpoint, error=reason)
        raise EmbeddingTransportError(
            f"{source} network error at {endpoint}: {reason}",
            endpoint=endpoint,
        ) from e
