"""
Labeled field extraction from a block of agent text.
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .listing_regexes import first_group, LISTING_URL_PATTERNS, FIELD_PATTERNS
from .models import ListingDetails

logger = logging.getLogger(__name__)


def extract_listing_url(text: str, url_patterns: Sequence[re.Pattern] = LISTING_URL_PATTERNS) -> Optional[str]:
    """
    Return the listing URL from the first pattern that matches anywhere in text.

    Later patterns are not tried once one matches, even if they would find
    a different URL.
    """
    for pattern in url_patterns:
        url = first_group(pattern, text)
        if url:
            return url
    return None


def extract_fields(
    text: str,
    field_patterns: Sequence[Tuple[str, re.Pattern]] = FIELD_PATTERNS,
    url_patterns: Sequence[re.Pattern] = LISTING_URL_PATTERNS,
) -> ListingDetails:
    """
    Recover listing fields from text.

    Each field pattern is searched independently; a field is set only when
    its own pattern matches. Nothing is parsed or validated here, values are
    kept as the agent wrote them.

    Args:
        text: Section (or whole response) to scan
        field_patterns: (field name, pattern) pairs; names are ListingDetails attributes
        url_patterns: Ordered listing URL patterns

    Returns:
        ListingDetails, possibly empty
    """
    found = {}

    url = extract_listing_url(text, url_patterns)
    if url:
        found['url'] = url

    for field_name, pattern in field_patterns:
        value = first_group(pattern, text)
        if value:
            found[field_name] = value

    missing: List[str] = [name for name, _ in field_patterns if name not in found]
    logger.debug(f"Extracted fields {sorted(found)}; missing {missing}")
    return ListingDetails(**found)
