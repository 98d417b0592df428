"""
Assembling a normalized response from raw agent text.
"""

import logging
from typing import Optional

from .extractor import extract_fields
from .heading_keywords import HeadingClassifier, SectionKind
from .models import ListingDetails, NormalizedResponse
from .segmenter import segment
from .sources import extract_sources, fallback_sources
from .websites import WebsiteRegistry, default_registry

logger = logging.getLogger(__name__)


class ResponseParser:
    """Interprets agent replies against a website registry and heading classifier."""

    def __init__(self, registry: Optional[WebsiteRegistry] = None, classifier: Optional[HeadingClassifier] = None):
        """
        Args:
            registry: Known listing websites (default: the built-in Irish sites)
            classifier: Heading classifier (default: built-in keywords)
        """
        self.registry = registry or default_registry()
        self.classifier = classifier or HeadingClassifier()

    def parse(self, text: str) -> NormalizedResponse:
        """
        Interpret one agent response.

        The text is returned untouched. Details come from the last
        "car details"/"listing details" section (a later one replaces an
        earlier one entirely); sources come from every source section in
        order. If no source links were found, a single source is derived
        from the listing URL's website.
        """
        text = text if text is not None else ""
        details: Optional[ListingDetails] = None
        sources = []

        for section in segment(text, self.classifier):
            if section.kind == SectionKind.DETAILS:
                details = extract_fields(section.text)
            elif section.kind == SectionKind.SOURCES:
                sources.extend(extract_sources(section.text, self.registry))

        if details is not None and details.is_empty():
            details = None

        if not sources and details is not None:
            sources = fallback_sources(details.url, self.registry)

        logger.debug(
            f"Parsed response: {len(text)} chars, "
            f"details={'yes' if details else 'no'}, {len(sources)} source(s)"
        )
        return NormalizedResponse(text=text, details=details, sources=tuple(sources))


_default_parser = ResponseParser()


def assemble(text: str) -> NormalizedResponse:
    """Parse text with the default registry and heading keywords."""
    return _default_parser.parse(text)
