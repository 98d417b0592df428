"""
Car Chat Parser - interprets car search agent replies into listing details and sources.
"""

__version__ = "0.1.0"

from .models import (
    ListingDetails, Source, NormalizedResponse, WebsiteRegistryEntry,
    ConversationMessage, MessageType
)
from .websites import WebsiteRegistry, DEFAULT_WEBSITES, default_registry, load_websites_from_csv
from .heading_keywords import HEADING_KEYWORDS, HeadingClassifier, SectionKind, get_keywords, contains_keyword
from .extractor import extract_fields, extract_listing_url
from .segmenter import Section, segment, split_sections
from .sources import extract_sources, fallback_sources
from .assembler import ResponseParser, assemble
from .conversation import CarSpecs, AgentReply, build_assistant_message, run_search, ERROR_MESSAGE
from .logging_config import setup_logging
from .config import ParserConfig
from .validator import ListingValidator, ValidationReport
from .utils import save_to_json, save_to_csv, save_to_file
from .listing_regexes import (
    first_group, FIELD_PATTERNS, LISTING_URL_PATTERNS, MARKDOWN_LINK_REGEX,
    parse_price_to_int, parse_mileage_to_int, parse_year
)

__all__ = [
    "ListingDetails",
    "Source",
    "NormalizedResponse",
    "WebsiteRegistryEntry",
    "ConversationMessage",
    "MessageType",
    "WebsiteRegistry",
    "DEFAULT_WEBSITES",
    "default_registry",
    "load_websites_from_csv",
    "HEADING_KEYWORDS",
    "HeadingClassifier",
    "SectionKind",
    "get_keywords",
    "contains_keyword",
    "extract_fields",
    "extract_listing_url",
    "Section",
    "segment",
    "split_sections",
    "extract_sources",
    "fallback_sources",
    "ResponseParser",
    "assemble",
    "CarSpecs",
    "AgentReply",
    "build_assistant_message",
    "run_search",
    "ERROR_MESSAGE",
    "setup_logging",
    "ParserConfig",
    "ListingValidator",
    "ValidationReport",
    "save_to_json",
    "save_to_csv",
    "save_to_file",
    "first_group",
    "FIELD_PATTERNS",
    "LISTING_URL_PATTERNS",
    "MARKDOWN_LINK_REGEX",
    "parse_price_to_int",
    "parse_mileage_to_int",
    "parse_year",
]
