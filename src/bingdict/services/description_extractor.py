"""Meta description extraction from a raw Bing Dictionary page."""

import re

from bingdict.domain.model.errors import PageError

# Shortest run between the opening attribute and the closing `" />`
_DESCRIPTION_RE = re.compile(
    rb'<meta name="description" content="(.*?)" />',
    re.DOTALL,
)


def extract_description(page: bytes) -> bytes:
    """Return the raw ``content`` of the page's meta description tag.

    The bytes are returned as-is; no decoding or unescaping happens here.

    Raises:
        PageError: The tag or its terminator is missing.
    """
    match = _DESCRIPTION_RE.search(page)
    if match is None:
        raise PageError()
    return match.group(1)
