"""Standalone async fetch client for node data.

This client is the provider's default fetch capability. It retrieves a body
from an `http://`, `https://`, or `file://` URL and returns it either as
text or, when the server labels it JSON, as the decoded value.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Mapping, cast

import aiohttp
import async_timeout
from yarl import URL

from .const import (
    DEFAULT_REJECT_UNAUTHORIZED,
    DEFAULT_TIMEOUT_SECONDS,
    LOGGER_NAME,
    OPT_HEADERS,
    OPT_REJECT_UNAUTHORIZED,
)
from .exceptions import FetchError
from .payloads import loads_json

_LOGGER = logging.getLogger(LOGGER_NAME)

_HTTP_SCHEMES: frozenset[str] = frozenset({"http", "https"})


def _is_json_content_type(content_type: str | None) -> bool:
    mime = (content_type or "").split(";", 1)[0].strip().lower()
    return mime == "application/json" or mime.endswith("+json")


def request_headers(options: Mapping[str, Any] | None) -> dict[str, str]:
    """Extract request headers from fetch options.

    Args:
        options: Fetch options mapping.

    Returns:
        Header mapping with string keys and values.
    """
    headers_any: Any = (options or {}).get(OPT_HEADERS)
    if not isinstance(headers_any, Mapping):
        return {}
    return {
        str(k): str(v) for k, v in cast(Mapping[Any, Any], headers_any).items()
    }


def verify_tls(options: Mapping[str, Any] | None) -> bool:
    """Return whether TLS certificates should be verified."""
    value: Any = (options or {}).get(OPT_REJECT_UNAUTHORIZED)
    if isinstance(value, bool):
        return value
    return DEFAULT_REJECT_UNAUTHORIZED


class NodeDataClient:
    """Async client that fetches raw node data from a URL."""

    def __init__(
        self,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout_seconds: int | None = None,
    ) -> None:
        self.timeout_seconds = int(timeout_seconds or DEFAULT_TIMEOUT_SECONDS)

        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def async_close(self) -> None:
        """Close any internally-owned aiohttp session."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def async_fetch_body(
        self, url: str, options: Mapping[str, Any] | None = None
    ) -> Any:
        """Fetch a body from a URL.

        Args:
            url: `http://`, `https://`, or `file://` URL.
            options: Mapping with optional `headers` and `rejectUnauthorized`.

        Returns:
            Decoded JSON for JSON-labelled HTTP responses, otherwise text.

        Raises:
            FetchError: On unsupported schemes, network, filesystem, or HTTP
                errors.
        """
        parsed = URL(url)
        scheme = (parsed.scheme or "").lower()

        if scheme == "file":
            return await self._async_read_file(parsed)
        if scheme in _HTTP_SCHEMES:
            return await self._async_http_get(url, options)
        raise FetchError(f"Unsupported URL scheme for {url!r}")

    async def _async_read_file(self, parsed: URL) -> str:
        path = Path(parsed.path)
        _LOGGER.debug("Reading node data from %s", path)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as err:
            raise FetchError(f"Error reading node data from {path}: {err}") from err

    async def _async_http_get(
        self, url: str, options: Mapping[str, Any] | None
    ) -> Any:
        kwargs: dict[str, Any] = {"headers": request_headers(options)}
        if not verify_tls(options):
            kwargs["ssl"] = False

        _LOGGER.debug("Fetching node data url=%s", url)
        try:
            async with async_timeout.timeout(self.timeout_seconds):
                async with self.session.get(url, **kwargs) as resp:
                    _LOGGER.debug("Node data url=%s HTTP %s", url, resp.status)
                    if resp.status < 200 or resp.status >= 300:
                        raise FetchError(
                            f"Error fetching node data (status={resp.status})",
                            status=resp.status,
                        )
                    body = await resp.text()
                    content_type = resp.headers.get("Content-Type")
        except (asyncio.TimeoutError, aiohttp.ClientError) as err:
            raise FetchError(f"Error fetching node data: {err}") from err

        if not _is_json_content_type(content_type):
            return body
        try:
            return loads_json(body)
        except ValueError:
            # Leave malformed JSON to the provider's format check.
            return body
