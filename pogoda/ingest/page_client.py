"""HTTP client for the weather pages."""

import logging
from typing import Protocol

import httpx

from pogoda.config.schema import DEFAULT_USER_AGENT
from pogoda.ingest.document import Document, SoupDocument

logger = logging.getLogger(__name__)


class PageFetchError(Exception):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class DocumentFetcher(Protocol):
    async def __aenter__(self) -> "DocumentFetcher": ...

    async def __aexit__(self, *exc_info) -> None: ...

    async def fetch(self, url: str) -> Document: ...


class PageClient:
    """Fetches pages through one httpx session so cookies carry over.

    Use as an async context manager; no retries are made.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "PageClient":
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> SoupDocument:
        if self._client is None:
            raise RuntimeError("PageClient used outside 'async with'")

        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PageFetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise PageFetchError(url, str(e) or type(e).__name__) from e

        logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
        return SoupDocument.from_html(resp.text)
