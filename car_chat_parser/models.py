"""
Data models for parsed agent responses.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional, Tuple, List, Dict, Any


# Python attribute name -> key used by the chat front end
WIRE_NAMES = {
    "monthly_from": "monthlyFrom",
}


@dataclass(frozen=True)
class ListingDetails:
    """Car listing fields recovered from an agent response.

    Every value is a display string exactly as the agent wrote it (trimmed).
    Fields the agent did not mention stay None.
    """

    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[str] = None
    price: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    monthly_from: Optional[str] = None
    mileage: Optional[str] = None
    url: Optional[str] = None

    def __post_init__(self):
        """Validate the listing data."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{f.name} must be a non-empty string or None")
            if value != value.strip():
                raise ValueError(f"{f.name} must be trimmed")

    def is_empty(self) -> bool:
        """True when no field was recovered."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, str]:
        """Convert to a dictionary, omitting absent fields."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                data[WIRE_NAMES.get(f.name, f.name)] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ListingDetails':
        """
        Build from a dictionary using either wire or attribute keys.

        Blank and non-string values are dropped rather than rejected, since
        structured replies from the agent are not guaranteed to be clean.
        """
        reverse = {wire: name for name, wire in WIRE_NAMES.items()}
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (data or {}).items():
            name = reverse.get(key, key)
            if name not in known or value is None:
                continue
            value = str(value).strip()
            if value:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class Source:
    """A citation pointing back to a listing website."""

    name: str
    url: str
    icon: Optional[str] = None

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string")
        if not self.url or not isinstance(self.url, str):
            raise ValueError("url must be a non-empty string")

    def to_dict(self) -> Dict[str, str]:
        data = {"name": self.name, "url": self.url}
        if self.icon:
            data["icon"] = self.icon
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Source':
        return cls(name=data.get("name", ""), url=data.get("url", ""), icon=data.get("icon") or None)


@dataclass(frozen=True)
class WebsiteRegistryEntry:
    """A recognised car listing website."""

    name: str
    domain: str
    base_url: str
    icon: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("name must be a non-empty string")
        if not self.domain or self.domain != self.domain.lower():
            raise ValueError(f"domain must be a non-empty lower-case host name: {self.domain!r}")
        if not self.base_url.startswith(('http://', 'https://')):
            raise ValueError(f"base_url '{self.base_url}' doesn't start with http:// or https://")

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "domain": self.domain,
            "base_url": self.base_url,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class NormalizedResponse:
    """One agent response after interpretation.

    ``text`` is always the untouched response body; ``details`` and
    ``sources`` are what could be recovered from it.
    """

    text: str
    details: Optional[ListingDetails] = None
    sources: Tuple[Source, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the response to a dictionary."""
        return {
            "text": self.text,
            "details": self.details.to_dict() if self.details else None,
            "sources": [source.to_dict() for source in self.sources],
        }


class MessageType(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    ERROR = "error"
    LOADING = "loading"


@dataclass
class ConversationMessage:
    """A single entry in the chat transcript owned by the front end."""

    type: MessageType
    content: str = ""
    car_listings: Optional[List[ListingDetails]] = None
    sources: Optional[List[Source]] = None

    @classmethod
    def user(cls, content: str) -> 'ConversationMessage':
        return cls(MessageType.USER, content)

    @classmethod
    def loading(cls) -> 'ConversationMessage':
        return cls(MessageType.LOADING)

    @classmethod
    def error(cls, content: str) -> 'ConversationMessage':
        return cls(MessageType.ERROR, content)

    @classmethod
    def from_response(cls, response: NormalizedResponse) -> 'ConversationMessage':
        """Wrap a parsed response; empty results are left unset."""
        return cls(
            MessageType.ASSISTANT,
            response.text,
            car_listings=[response.details] if response.details else None,
            sources=list(response.sources) or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value, "content": self.content}
        if self.car_listings is not None:
            data["carListings"] = [listing.to_dict() for listing in self.car_listings]
        if self.sources is not None:
            data["sources"] = [source.to_dict() for source in self.sources]
        return data
