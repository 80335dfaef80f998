"""Page fetcher port: outbound interface for retrieving dictionary pages."""

from typing import Protocol


class PageFetcher(Protocol):
    """Port for fetching a page body.

    fetch() returns the raw response bytes for a URL. Transport and
    HTTP status failures surface as FetchError.
    """

    async def fetch(self, url: str) -> bytes: ...
