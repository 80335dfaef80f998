"""In-memory implementation of PageFetcher for testing."""

from bingdict.domain.model.errors import FetchError


class FakePageFetcher:
    """Fake page fetcher that returns preconfigured page bodies.

    Pass a single ``bytes`` body to answer every URL, or a mapping of
    URL to body to answer only those URLs.
    """

    def __init__(self, pages: dict[str, bytes] | bytes):
        self.pages = pages
        self.last_url: str | None = None

    async def fetch(self, url: str) -> bytes:
        self.last_url = url
        if isinstance(self.pages, bytes):
            return self.pages
        if url not in self.pages:
            raise FetchError(url, "no fake page configured")
        return self.pages[url]
