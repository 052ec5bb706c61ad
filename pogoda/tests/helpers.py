"""Test helpers: fixture pages and an in-memory fetcher."""

from datetime import date
from pathlib import Path

from pogoda.ingest.document import SoupDocument
from pogoda.ingest.page_client import PageFetchError

FIXTURE_DIR = Path(__file__).parent / "fixtures"
BASE_URL = "https://test-pogoda.example.com/"
HOURLY_URL = "https://test-pogoda.example.com/details/"

# 2016-03-17 is a Thursday
TODAY = date(2016, 3, 17)


def read_fixture(name: str) -> str:
    return (FIXTURE_DIR / name).read_text(encoding="utf-8")


class FakeFetcher:
    """In-memory DocumentFetcher: url -> html text or exception to raise."""

    def __init__(self, pages: dict[str, str | Exception]):
        self.pages = pages
        self.requested: list[str] = []
        self.entered = 0

    async def __aenter__(self) -> "FakeFetcher":
        self.entered += 1
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def fetch(self, url: str) -> SoupDocument:
        self.requested.append(url)
        page = self.pages.get(url)
        if page is None:
            raise PageFetchError(url, "HTTP 404")
        if isinstance(page, Exception):
            raise page
        return SoupDocument.from_html(page)
