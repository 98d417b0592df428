"""
Configuration file handling for the parser.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Dict, Optional, List, Any

from .assembler import ResponseParser
from .heading_keywords import HeadingClassifier, SectionKind, get_keywords
from .websites import DEFAULT_WEBSITES, WebsiteRegistry, load_websites_from_csv

logger = logging.getLogger(__name__)


def _setting(config: Dict[str, Any], key: str, default: Any) -> Any:
    """Look up key, treating an explicit null the same as a missing key."""
    value = config.get(key)
    return default if value is None else value


class ParserConfig:
    """Configuration for the response parser and CLI."""

    def __init__(self, config_dict: Dict[str, Any] = None):
        """
        Initialize configuration from a dictionary.

        Args:
            config_dict: Configuration dictionary
        """
        config = config_dict or {}

        # Known listing websites: key -> {name, domain, base_url, icon}
        self.websites: Dict[str, Dict[str, Any]] = copy.deepcopy(_setting(config, 'websites', DEFAULT_WEBSITES))
        self.websites_csv: Optional[str] = config.get('websites_csv')  # extra sites, merged over websites

        # Heading classification
        self.details_keywords: List[str] = list(_setting(config, 'details_keywords', get_keywords(SectionKind.DETAILS)))
        self.sources_keywords: List[str] = list(_setting(config, 'sources_keywords', get_keywords(SectionKind.SOURCES)))

        # Output options
        self.output_path: Optional[str] = config.get('output_path')  # None = stdout
        self.output_format: str = _setting(config, 'output_format', 'auto')  # 'json', 'csv', 'auto'
        self.validate: bool = _setting(config, 'validate', False)

        # Logging options
        self.log_level: str = _setting(config, 'log_level', 'INFO')
        self.log_file: Optional[str] = config.get('log_file')

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'websites': self.websites,
            'websites_csv': self.websites_csv,
            'details_keywords': self.details_keywords,
            'sources_keywords': self.sources_keywords,
            'output_path': self.output_path,
            'output_format': self.output_format,
            'validate': self.validate,
            'log_level': self.log_level,
            'log_file': self.log_file,
        }

    def build_registry(self) -> WebsiteRegistry:
        """
        Create the website registry from the configured sites.

        Raises:
            ValueError: If a website descriptor is invalid
            FileNotFoundError: If websites_csv is set but missing
        """
        websites = dict(self.websites)
        if self.websites_csv:
            websites.update(load_websites_from_csv(self.websites_csv))
        return WebsiteRegistry.from_config(websites)

    def build_classifier(self) -> HeadingClassifier:
        return HeadingClassifier(self.details_keywords, self.sources_keywords)

    def build_parser(self) -> ResponseParser:
        return ResponseParser(self.build_registry(), self.build_classifier())

    @classmethod
    def from_file(cls, config_path: str) -> 'ParserConfig':
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to configuration file

        Returns:
            ParserConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(config_dict, dict):
            raise ValueError("Config file must contain a JSON object")

        logger.info(f"Loaded configuration from {config_path}")
        return cls(config_dict)

    def save_to_file(self, config_path: str) -> None:
        """
        Save configuration to a JSON file.

        Args:
            config_path: Path to save configuration file
        """
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info(f"Saved configuration to {config_path}")

    @classmethod
    def create_default(cls, config_path: str = 'parser_config.json') -> 'ParserConfig':
        """
        Create a default configuration file with example values.

        Args:
            config_path: Path to save default configuration

        Returns:
            ParserConfig object with default values
        """
        config = cls()
        config.save_to_file(config_path)
        return config
