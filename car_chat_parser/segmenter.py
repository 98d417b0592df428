"""
Splitting agent responses into heading sections.
"""

from dataclasses import dataclass
from typing import List, Optional

from .heading_keywords import HeadingClassifier, SectionKind
from .listing_regexes import first_group, SECTION_BOUNDARY_REGEX, HEADING_REGEX


@dataclass(frozen=True)
class Section:
    """A heading line and the text up to the next heading."""

    text: str
    heading: Optional[str]
    kind: SectionKind


def split_sections(text: str) -> List[str]:
    """
    Split text before every level 1-3 markdown heading.

    Joining the result gives back the original text.
    """
    return [part for part in SECTION_BOUNDARY_REGEX.split(text or "") if part]


def heading_of(section: str) -> Optional[str]:
    """Text of the first level 1-3 heading line in a section, if any."""
    return first_group(HEADING_REGEX, section)


def segment(text: str, classifier: Optional[HeadingClassifier] = None) -> List[Section]:
    """
    Split a response into classified sections.

    Text before the first heading becomes an OTHER section with no heading.
    """
    classifier = classifier or HeadingClassifier()
    sections = []
    for part in split_sections(text):
        heading = heading_of(part)
        sections.append(Section(part, heading, classifier.classify(heading)))
    return sections
