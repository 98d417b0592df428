"""
Turning search agent replies into chat messages.

The agent call itself is supplied by the caller as any callable with the
signature ``invoke(session_id, chat_input, car_specs) -> dict``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .assembler import ResponseParser
from .models import ConversationMessage, ListingDetails, MessageType, Source

logger = logging.getLogger(__name__)


ERROR_MESSAGE = "Sorry, there was an error processing your request. Please try again."


@dataclass
class CarSpecs:
    """Structured search filters sent alongside the user's query."""

    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    county: Optional[str] = None
    features: List[str] = field(default_factory=list)
    usage: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None

    @classmethod
    def from_params(cls, params: Mapping[str, Optional[str]]) -> 'CarSpecs':
        """
        Build filters from string search parameters.

        Expected keys: make, model, location, minPrice, maxPrice, minYear,
        features (comma-separated) and usage. Blank values and numbers that
        don't parse are left unset.
        """
        features = params.get('features') or ''
        return cls(
            make=params.get('make') or None,
            model=params.get('model') or None,
            year=_to_int(params.get('minYear')),
            county=params.get('location') or None,
            features=[f.strip() for f in features.split(',') if f.strip()],
            usage=params.get('usage') or None,
            min_price=_to_int(params.get('minPrice')),
            max_price=_to_int(params.get('maxPrice')),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the agent's payload shape, omitting unset filters."""
        data = {
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "county": self.county,
            "features": self.features,
            "usage": self.usage,
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
        }
        return {key: value for key, value in data.items() if value is not None}


def _to_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric search parameter: {value!r}")
        return None


@dataclass
class AgentReply:
    """What the search agent sent back: always a message, sometimes structured data."""

    message: str
    car_listings: Optional[List[ListingDetails]] = None
    sources: Optional[List[Source]] = None

    @property
    def is_structured(self) -> bool:
        return bool(self.car_listings) or bool(self.sources)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> 'AgentReply':
        """
        Read an agent payload with keys message, carListings and sources.

        Raises:
            ValueError: If the payload has no message
        """
        message = payload.get('message') if payload else None
        if not isinstance(message, str) or not message:
            raise ValueError("Agent reply has no message")

        car_listings = None
        if payload.get('carListings'):
            car_listings = []
            for item in payload['carListings']:
                if not isinstance(item, Mapping):
                    logger.warning(f"Skipping invalid listing in agent reply: {item!r}")
                    continue
                listing = ListingDetails.from_dict(item)
                if not listing.is_empty():
                    car_listings.append(listing)
            car_listings = car_listings or None

        sources = None
        if payload.get('sources'):
            sources = []
            for item in payload['sources']:
                try:
                    sources.append(Source.from_dict(item))
                except (ValueError, AttributeError) as e:
                    logger.warning(f"Skipping invalid source in agent reply: {e}")
            sources = sources or None

        return cls(message=message, car_listings=car_listings, sources=sources)


def build_assistant_message(reply: AgentReply, parser: Optional[ResponseParser] = None) -> ConversationMessage:
    """
    Prefer the agent's structured listings and sources; parse the message
    text only when the reply carries neither.
    """
    if reply.is_structured:
        return ConversationMessage(
            MessageType.ASSISTANT,
            reply.message,
            car_listings=reply.car_listings,
            sources=reply.sources,
        )

    parser = parser or ResponseParser()
    return ConversationMessage.from_response(parser.parse(reply.message))


AgentInvoker = Callable[[str, str, Dict[str, Any]], Mapping[str, Any]]


def run_search(
    invoke: AgentInvoker,
    session_id: str,
    chat_input: str,
    car_specs: Optional[CarSpecs] = None,
    parser: Optional[ResponseParser] = None,
) -> ConversationMessage:
    """
    Ask the agent and turn its reply into an assistant message.

    Any failure of the call (or an unusable reply) becomes an error message;
    the parser never sees a failed call.
    """
    specs = (car_specs or CarSpecs()).to_dict()
    try:
        payload = invoke(session_id, chat_input, specs)
        reply = AgentReply.from_dict(payload)
    except Exception as e:
        logger.error(f"Search agent call failed for session {session_id}: {e}", exc_info=True)
        return ConversationMessage.error(ERROR_MESSAGE)

    return build_assistant_message(reply, parser)
