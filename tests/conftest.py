import logging

import pytest

from car_chat_parser.assembler import ResponseParser
from car_chat_parser.websites import default_registry


SAMPLE_REPLY = """Here is a great option I found for you.

## Car Details
**Make:** Toyota
**Model:** Corolla
**Year:** 2019
**Price:** €18,950
**Location:** Dublin
**Mileage:** 45,000 km
**Monthly from:** €320
**Description:** One owner, full service history.

You can view it [here](https://www.carzone.ie/used-cars/toyota/corolla/fpa/123).

## Sources
- [Carzone](https://www.carzone.ie/used-cars/toyota/corolla/fpa/123)
"""


@pytest.fixture
def registry():
    """Registry with the built-in listing websites."""
    return default_registry()


@pytest.fixture
def parser(registry):
    return ResponseParser(registry)


@pytest.fixture
def sample_reply():
    return SAMPLE_REPLY


@pytest.fixture
def restore_logging():
    """Drop the handlers a test installed on the root logger and restore its level."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
