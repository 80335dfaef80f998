"""Paraphrase parsing from an extracted meta description.

The description of a genuine result reads
``<head><escaped query><tail><body>`` where head and tail come from the
Market. Anything else (no head, or nothing after the tail) means the
dictionary has no entry for the query.
"""

import html
import logging

from bingdict.domain.model.errors import DecodeError
from bingdict.domain.model.market import Market, ZH_CN
from bingdict.domain.model.paraphrase import Paraphrase

logger = logging.getLogger(__name__)


def escaped_length(query: str) -> int:
    """UTF-8 byte length of the query as the page embeds it (``&<>`` escaped)."""
    return len(html.escape(query, quote=False).encode("utf-8"))


def parse_paraphrase(
    query: str,
    description: bytes,
    market: Market = ZH_CN,
) -> Paraphrase | None:
    """Parse a meta description into a Paraphrase.

    Args:
        query: The word or phrase that was looked up.
        description: Raw description bytes from extract_description().
        market: Market whose boilerplate wraps the result.

    Returns:
        Paraphrase, or None when the page carries no translation.

    Raises:
        DecodeError: The body after the boilerplate is not valid UTF-8.
    """
    query_len = escaped_length(query)
    prefix_len = query_len + market.boilerplate_length

    if not description.startswith(market.head_bytes) or len(description) <= prefix_len:
        logger.debug(
            "No translation in description",
            extra={"query": query, "market": market.code, "description_length": len(description)},
        )
        return None

    tail_start = len(market.head_bytes) + query_len
    observed_tail = description[tail_start:prefix_len]
    if observed_tail != market.tail_bytes:
        logger.warning(
            "Boilerplate tail mismatch",
            extra={
                "query": query,
                "market": market.code,
                "expected": market.tail_bytes.hex(),
                "observed": observed_tail.hex(),
            },
        )

    try:
        body = description[prefix_len:].decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise DecodeError(f"invalid UTF-8 in description for {query!r}: {e}") from e

    return Paraphrase.parse(query, body)
