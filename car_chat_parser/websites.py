"""
Registry of known car listing websites.
"""

import csv
import logging
from types import MappingProxyType
from typing import Dict, Optional, Mapping, Any
from pathlib import Path
from urllib.parse import urlparse

from .models import WebsiteRegistryEntry

logger = logging.getLogger(__name__)


DEFAULT_WEBSITES: Dict[str, Dict[str, str]] = {
    "carzone": {
        "name": "Carzone",
        "domain": "carzone.ie",
        "base_url": "https://www.carzone.ie",
        "icon": "/logos/carzone.png",
    },
    "donedeal": {
        "name": "DoneDeal",
        "domain": "donedeal.ie",
        "base_url": "https://www.donedeal.ie",
        "icon": "/logos/donedeal.png",
    },
    "carsireland": {
        "name": "Cars Ireland",
        "domain": "cars.ie",
        "base_url": "https://www.cars.ie",
        "icon": "/logos/carsireland.png",
    },
}


def hostname_of(url: str) -> Optional[str]:
    """
    Return the lower-cased host of a URL without a leading 'www.' label.

    None when the URL has no host or can't be parsed.
    """
    try:
        hostname = urlparse(url).hostname
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Error parsing URL {url!r}: {e}")
        return None

    if not hostname:
        logger.warning(f"Error parsing URL {url!r}: no host name")
        return None

    if hostname.startswith('www.'):
        hostname = hostname[4:]
    return hostname


class WebsiteRegistry:
    """Read-only lookup of listing websites by domain."""

    def __init__(self, entries: Mapping[str, WebsiteRegistryEntry]):
        """
        Args:
            entries: Mapping of registry key (e.g. 'carzone') to entry
        """
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_config(cls, websites: Mapping[str, Mapping[str, Any]]) -> 'WebsiteRegistry':
        """
        Build a registry from a mapping of key -> descriptor dict.

        Raises:
            ValueError: If a descriptor is missing a field or is invalid
        """
        entries = {}
        for key, descriptor in websites.items():
            try:
                entries[key] = WebsiteRegistryEntry(
                    name=descriptor['name'],
                    domain=descriptor['domain'].strip().lower(),
                    base_url=descriptor['base_url'].rstrip('/'),
                    icon=descriptor.get('icon') or None,
                )
            except KeyError as e:
                raise ValueError(f"Website '{key}' is missing {e}")
            except (TypeError, AttributeError) as e:
                raise ValueError(f"Website '{key}' is invalid: {e}")
        return cls(entries)

    @property
    def entries(self) -> Mapping[str, WebsiteRegistryEntry]:
        return self._entries

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries.values())

    def get(self, key: str) -> Optional[WebsiteRegistryEntry]:
        return self._entries.get(key)

    def resolve(self, url: str) -> Optional[WebsiteRegistryEntry]:
        """
        Find the website a URL belongs to.

        Subdomains match their parent domain (m.donedeal.ie -> DoneDeal).

        Args:
            url: Any URL string

        Returns:
            WebsiteRegistryEntry, or None for unknown sites and malformed URLs
        """
        hostname = hostname_of(url)
        if hostname is None:
            return None

        for site in self._entries.values():
            if hostname == site.domain or hostname.endswith('.' + site.domain):
                return site
        return None

    def to_dict(self) -> Dict[str, Dict[str, Optional[str]]]:
        return {key: entry.to_dict() for key, entry in self._entries.items()}

    def __repr__(self):
        return f"WebsiteRegistry({list(self._entries.keys())})"


def load_websites_from_csv(csv_path: str) -> Dict[str, Dict[str, str]]:
    """
    Load website descriptors from a CSV file with columns key,name,domain,base_url[,icon].

    Args:
        csv_path: Path to CSV file

    Returns:
        Mapping suitable for WebsiteRegistry.from_config

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV format is invalid
    """
    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    websites: Dict[str, Dict[str, str]] = {}

    try:
        with open(csv_file, 'r', encoding='utf-8', newline='') as f:
            reader = csv.DictReader(f)

            required = {'key', 'name', 'domain', 'base_url'}
            if not reader.fieldnames or not required.issubset(reader.fieldnames):
                raise ValueError("CSV must contain key,name,domain,base_url columns")

            for row_num, row in enumerate(reader, start=2):  # Start at 2 (1 is header)
                key = (row.get('key') or '').strip()
                name = (row.get('name') or '').strip()
                domain = (row.get('domain') or '').strip().lower()
                base_url = (row.get('base_url') or '').strip()
                icon = (row.get('icon') or '').strip()

                if not key or not name or not domain or not base_url:
                    logger.warning(f"Skipping row {row_num}: missing key, name, domain, or base_url")
                    continue

                if not base_url.startswith(('http://', 'https://')):
                    logger.warning(f"Row {row_num}: base_url '{base_url}' doesn't start with http:// or https://")
                    continue

                websites[key] = {'name': name, 'domain': domain, 'base_url': base_url}
                if icon:
                    websites[key]['icon'] = icon

        logger.info(f"Loaded {len(websites)} websites from {csv_path}")
        return websites

    except csv.Error as e:
        raise ValueError(f"Error parsing CSV file: {e}")


def default_registry() -> WebsiteRegistry:
    """Registry of the Irish listing sites the agent searches."""
    return WebsiteRegistry.from_config(DEFAULT_WEBSITES)
