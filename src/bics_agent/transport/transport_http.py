# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Transport - httpx async client shared by all resource adapters.

Issues one request per call with a fixed timeout and no retry. Response
bodies are read in streaming mode so the size limit is enforced before the
whole body is held in memory.

Error Mapping:
    - ``httpx.TimeoutException`` -> ``TransportTimeoutError``
    - ``httpx.ConnectError`` -> ``TransportConnectionError``
    - any other ``httpx.HTTPError`` -> ``TransportConnectionError``
    - body over ``max_response_size`` -> ``TransportError``

A non-2xx response is not an error at this layer: it is returned with a
best-effort body (empty if the body could not be read).
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional
from uuid import uuid4

import httpx

from bics_agent.errors import (
    ModelAdapterErrorContext,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
)
from bics_agent.models.model_transport import (
    ModelTransportRequest,
    ModelTransportResponse,
)

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS: float = 30.0
_DEFAULT_MAX_RESPONSE_SIZE: int = 50 * 1024 * 1024  # 50 MB
_STREAMING_CHUNK_SIZE: int = 8192  # 8 KB chunks

_SIZE_THRESHOLD_KB: int = 1024
_SIZE_THRESHOLD_MB: int = 1024 * 1024
_SIZE_THRESHOLD_10MB: int = 10 * 1024 * 1024


def _categorize_size(size: int) -> str:
    """Categorize a byte size so exact payload sizes stay out of messages."""
    if size < _SIZE_THRESHOLD_KB:
        return "small"
    elif size < _SIZE_THRESHOLD_MB:
        return "medium"
    elif size < _SIZE_THRESHOLD_10MB:
        return "large"
    else:
        return "very_large"


class _ResponseTooLargeError(Exception):
    """Internal signal raised while streaming an oversized body."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Response body size ({_categorize_size(size)}) exceeds configured limit")
        self.size = size


class HttpTransport:
    """``ProtocolTransport`` implementation over ``httpx.AsyncClient``.

    One client is shared by every adapter; httpx clients are safe for
    concurrent use from many tasks.

    Args:
        timeout_seconds: Per-request timeout (default 30s)
        max_response_size: Maximum accepted response body in bytes
        default_headers: Headers sent with every request (credentials live here)
        client: Pre-built client to use instead of creating one
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
        max_response_size: int = _DEFAULT_MAX_RESPONSE_SIZE,
        default_headers: Optional[dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if max_response_size <= 0:
            raise ValueError("max_response_size must be positive")

        self._timeout = timeout_seconds
        self._max_response_size = max_response_size
        self._default_headers: dict[str, str] = dict(default_headers or {})
        self._owns_client = client is None
        self._client: Optional[httpx.AsyncClient] = client or httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
        )
        logger.info(
            "HttpTransport initialized",
            extra={
                "timeout_seconds": self._timeout,
                "max_response_size": self._max_response_size,
                "default_header_names": sorted(self._default_headers),
            },
        )

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    @property
    def max_response_size(self) -> int:
        return self._max_response_size

    @property
    def is_closed(self) -> bool:
        return self._client is None

    async def shutdown(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None:
            if self._owns_client:
                await self._client.aclose()
            self._client = None
        logger.info("HttpTransport shutdown complete")

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.shutdown()

    async def request(self, request: ModelTransportRequest) -> ModelTransportResponse:
        """Send one HTTP request and return its status and decoded body.

        Raises:
            TransportTimeoutError: If the request exceeded the timeout.
            TransportConnectionError: If the host could not be reached.
            TransportError: If the transport is closed or the body was too large.
        """
        method = request.method.value
        ctx = ModelAdapterErrorContext(
            operation=f"http.{method.lower()}",
            target_name=request.url,
            correlation_id=uuid4(),
        )
        if self._client is None:
            raise TransportError("HttpTransport is closed", context=ctx)

        headers = {**self._default_headers, **request.headers}
        params = list(request.params) or None

        try:
            async with self._client.stream(
                method,
                request.url,
                params=params,
                headers=headers,
                content=request.content,
            ) as response:
                body_bytes = await self._read_body(response)
                return self._build_response(response, body_bytes)

        except _ResponseTooLargeError as e:
            logger.warning(
                "Response body exceeded size limit",
                extra={
                    "size_category": _categorize_size(e.size),
                    "limit": self._max_response_size,
                    "url": request.url,
                },
            )
            raise TransportError(str(e), context=ctx) from e
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"HTTP {method} request timed out after {self._timeout}s",
                context=ctx,
                timeout_seconds=self._timeout,
            ) from e
        except httpx.ConnectError as e:
            raise TransportConnectionError(
                f"Failed to connect to {request.url}", context=ctx
            ) from e
        except httpx.HTTPError as e:
            raise TransportConnectionError(
                f"HTTP error during {method} request: {type(e).__name__}", context=ctx
            ) from e

    async def _read_body(self, response: httpx.Response) -> bytes:
        """Read the body with size enforcement.

        For non-2xx statuses the body is informational only: an oversized
        body is cut at the size limit and a read failure yields an empty
        body, so the status still decides the outcome.
        """
        content_length = response.headers.get("content-length")
        if content_length is not None and content_length.isdigit():
            if response.is_success and int(content_length) > self._max_response_size:
                raise _ResponseTooLargeError(int(content_length))

        chunks: list[bytes] = []
        total_size = 0
        try:
            async for chunk in response.aiter_bytes(chunk_size=_STREAMING_CHUNK_SIZE):
                total_size += len(chunk)
                if total_size > self._max_response_size:
                    if response.is_success:
                        raise _ResponseTooLargeError(total_size)
                    logger.debug(
                        "Error response body truncated at size limit",
                        extra={
                            "status_code": response.status_code,
                            "limit": self._max_response_size,
                        },
                    )
                    chunks.append(chunk[: len(chunk) - (total_size - self._max_response_size)])
                    break
                chunks.append(chunk)
        except httpx.HTTPError:
            if response.is_success:
                raise
            logger.debug(
                "Could not read error response body",
                extra={"status_code": response.status_code},
            )
            return b""
        return b"".join(chunks)

    def _build_response(
        self, response: httpx.Response, body_bytes: bytes
    ) -> ModelTransportResponse:
        try:
            body_text = body_bytes.decode(response.encoding or "utf-8")
        except (LookupError, UnicodeDecodeError):
            body_text = body_bytes.decode("latin-1")

        logger.debug(
            "Response body received",
            extra={
                "body_size_category": _categorize_size(len(body_bytes)),
                "status_code": response.status_code,
                "content_type": response.headers.get("content-type", ""),
            },
        )
        return ModelTransportResponse(
            status_code=response.status_code,
            body=body_text,
            headers=dict(response.headers),
        )


__all__: list[str] = ["HttpTransport"]
