"""
Heading keywords for classifying sections of an agent response.
"""

from enum import Enum
from typing import Dict, List, Optional, Iterable


class SectionKind(str, Enum):
    DETAILS = "details"
    SOURCES = "sources"
    OTHER = "other"


HEADING_KEYWORDS = {
    SectionKind.DETAILS: [
        "car details",
        "listing details",
    ],
    SectionKind.SOURCES: [
        "source",   # also covers "Sources"
        "from",     # "From Carzone", "Found from"
    ],
}

# Helper function to get keywords for a section kind
def get_keywords(kind: SectionKind) -> list:
    """Get keywords for a specific section kind."""
    return HEADING_KEYWORDS.get(kind, [])

# Helper function to check if text contains any keyword from a list
def contains_keyword(text: Optional[str], keywords: Iterable[str], case_sensitive: bool = False) -> bool:
    """Check if text contains any of the keywords."""
    if not text:
        return False

    keywords = list(keywords)
    if not keywords:
        return False

    if not case_sensitive:
        text = text.lower()
        keywords = [kw.lower() for kw in keywords]

    return any(keyword in text for keyword in keywords)


class HeadingClassifier:
    """
    Decide what a section heading announces.

    Details keywords are checked before source keywords, so
    "Listing details from Carzone" is a details section.
    """

    def __init__(self, details_keywords: Optional[List[str]] = None, sources_keywords: Optional[List[str]] = None):
        """
        Args:
            details_keywords: Phrases marking a car details section (default: HEADING_KEYWORDS)
            sources_keywords: Phrases marking a sources section (default: HEADING_KEYWORDS)
        """
        if details_keywords is None:
            details_keywords = get_keywords(SectionKind.DETAILS)
        if sources_keywords is None:
            sources_keywords = get_keywords(SectionKind.SOURCES)
        self.details_keywords = tuple(kw.lower() for kw in details_keywords)
        self.sources_keywords = tuple(kw.lower() for kw in sources_keywords)

    def classify(self, heading: Optional[str]) -> SectionKind:
        if contains_keyword(heading, self.details_keywords):
            return SectionKind.DETAILS
        if contains_keyword(heading, self.sources_keywords):
            return SectionKind.SOURCES
        return SectionKind.OTHER

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "details_keywords": list(self.details_keywords),
            "sources_keywords": list(self.sources_keywords),
        }
