"""
Source link extraction and website resolution.
"""

import logging
from typing import List, Optional

from .listing_regexes import MARKDOWN_LINK_REGEX
from .models import Source
from .websites import WebsiteRegistry

logger = logging.getLogger(__name__)


def extract_sources(section: str, registry: WebsiteRegistry) -> List[Source]:
    """
    Turn every [name](url) link in a section into a Source.

    Known sites get the registry name and icon but keep the link's own URL.
    Unknown sites keep the link text as name. Order is preserved and
    duplicates are kept.
    """
    sources = []
    for match in MARKDOWN_LINK_REGEX.finditer(section):
        name, url = match.group(1), match.group(2)
        website = registry.resolve(url)
        if website:
            sources.append(Source(name=website.name, url=url, icon=website.icon))
        else:
            sources.append(Source(name=name, url=url))
    return sources


def fallback_sources(listing_url: Optional[str], registry: WebsiteRegistry) -> List[Source]:
    """
    Derive a single source from the listing URL.

    Uses the site's base URL, not the listing URL. Empty when there is no
    listing URL or its site is unknown.
    """
    if not listing_url:
        return []

    website = registry.resolve(listing_url)
    if not website:
        logger.debug(f"No known website for listing URL {listing_url}")
        return []

    return [Source(name=website.name, url=website.base_url, icon=website.icon)]
