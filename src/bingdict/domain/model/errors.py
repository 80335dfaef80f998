"""Domain-level exceptions.

The extractor and parser raise these to report structural and decoding
failures. A missing translation is not an error: parsing returns None.
"""


class DictionaryError(Exception):
    """Base class for all dictionary lookup errors."""


class PageError(DictionaryError):
    """Expected <meta name="description" /> tag is absent from the page."""

    def __init__(self, message: str = 'no <meta name="description" /> found in page'):
        super().__init__(message)


class DecodeError(DictionaryError):
    """Description bytes after the boilerplate are not valid UTF-8."""


class FetchError(DictionaryError):
    """Failed to retrieve the dictionary page."""

    def __init__(self, url: str, message: str = "failed to fetch page"):
        self.url = url
        super().__init__(f"{message}: {url}")
