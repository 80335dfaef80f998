"""Translation service: fetch, extract and parse one dictionary lookup.

Pipeline: build search URL → PageFetcher → meta description → Paraphrase
"""

import logging
import os
from urllib.parse import quote

from bingdict.domain.model.market import Market, ZH_CN
from bingdict.domain.model.paraphrase import Paraphrase
from bingdict.port.page_fetcher import PageFetcher
from bingdict.services.description_extractor import extract_description
from bingdict.services.paraphrase_parser import parse_paraphrase

logger = logging.getLogger(__name__)

BING_DICT_SEARCH_URL = os.getenv("BING_DICT_SEARCH_URL", "https://www.bing.com/dict/search")


def build_search_url(
    query: str,
    market: Market = ZH_CN,
    base_url: str = BING_DICT_SEARCH_URL,
) -> str:
    return f"{base_url}?mkt={market.code}&q={quote(query, safe='')}"


async def translate(
    query: str,
    fetcher: PageFetcher,
    market: Market = ZH_CN,
) -> Paraphrase | None:
    """Translate a word or phrase with Bing Dictionary.

    Args:
        query: Word or phrase to look up.
        fetcher: Page fetcher used for the HTTP request.
        market: Dictionary market to query.

    Returns:
        Paraphrase, or None if the word cannot be found.

    Raises:
        FetchError: The page could not be retrieved.
        PageError: The page has no meta description.
        DecodeError: The description is not valid UTF-8.
    """
    url = build_search_url(query, market)
    page = await fetcher.fetch(url)
    description = extract_description(page)
    paraphrase = parse_paraphrase(query, description, market)

    if paraphrase is None:
        logger.debug("No translation found", extra={"query": query, "market": market.code})
    else:
        logger.debug(
            "Translation found",
            extra={
                "query": query,
                "market": market.code,
                "pronunciation_count": len(paraphrase.pronunciations),
                "gender_count": len(paraphrase.genders),
            },
        )
    return paraphrase
