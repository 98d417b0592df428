"""
Regular expressions for extracting listing data from agent responses.
"""

import re


# ==============
# BASIC HELPERS
# ==============

def first_group(pattern, text, flags=0):
    """
    Return the first matched group(1) for a compiled pattern or pattern string.
    None if no match.
    """
    if isinstance(pattern, str):
        regex = re.compile(pattern, flags)
    else:
        regex = pattern
    m = regex.search(text)
    return m.group(1).strip() if m else None


# ====================
# HEADINGS
# ====================

# A section starts at every line opening with 1-3 '#' and a space.
# '#### Foo' is not a boundary.
SECTION_BOUNDARY_REGEX = re.compile(r"(?=^#{1,3} )", re.MULTILINE)

HEADING_REGEX = re.compile(r"^#{1,3} (.+)$", re.MULTILINE)

# Example:
# heading = first_group(HEADING_REGEX, section)


# ====================
# MARKDOWN LINKS
# ====================

# [Carzone](https://www.carzone.ie/used-cars/123)
MARKDOWN_LINK_REGEX = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


# ====================
# LISTING URL
# ====================

# Tried in order; the first pattern found anywhere in the text wins.
LISTING_URL_PATTERNS = [
    # [here](url), [View Listing](url), [anything](url)
    re.compile(r"\[(?:here|View Listing|.*?)\]\((https?://[^\s)]+)\)"),
    re.compile(r"View the listing: (https?://[^\s]+)"),
    re.compile(r"Listing URL: (https?://[^\s]+)"),
    re.compile(r"You can view this car at: (https?://[^\s]+)"),
    # Bare links on the listing sites the agent knows about
    re.compile(r"(https?://(?:www\.)(?:carzone|donedeal|carsireland)\.ie[^\s]+)"),
]


# ====================
# LABELED FIELDS
# ====================

def label_regex(label):
    """
    Build the pattern for a 'Label: value' line.

    The label may be bold or italic (**Make:**, **Make**:, *Make:*), the colon
    is optional and may follow a space. The value stops at end of line or the
    next '*', and never starts with whitespace, '*' or ':' so an empty label
    yields no match.
    """
    return re.compile(
        r"(?:\*{1,2})?" + label + r"(?:\*{1,2})?[ \t]*:?(?:\*{1,2})?\s*([^*\s:][^*\n]*)",
        re.IGNORECASE,
    )


# (field name, pattern) pairs, each evaluated independently
FIELD_PATTERNS = [
    ("make", label_regex(r"Make")),
    ("model", label_regex(r"Model")),
    ("year", label_regex(r"Year")),
    ("price", label_regex(r"Price")),
    ("location", label_regex(r"Location")),
    ("description", label_regex(r"Description")),
    ("monthly_from", label_regex(r"Monthly from")),
    ("mileage", label_regex(r"Mileage")),
]

# Example:
# make = first_group(FIELD_PATTERNS[0][1], "**Make:** Toyota")  # "Toyota"


# ====================
# COERCION HELPERS
# ====================

YEAR_REGEX = re.compile(r"\b((?:19|20)[0-9]{2})\b")

NUMBER_REGEX = re.compile(r"([0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)(?:\.[0-9]+)?\s*(k\b)?", re.IGNORECASE)


def parse_price_to_int(price_str):
    """
    Turn '€20,000', '£18,500.00' or '15k' into an int.
    Returns None if it can't parse.
    """
    if not price_str:
        return None
    m = NUMBER_REGEX.search(price_str)
    if not m:
        return None
    value = int(m.group(1).replace(",", ""))
    if m.group(2):
        value *= 1000
    return value


def parse_mileage_to_int(mileage_str):
    """
    Turn '85,000 km' or '52000 miles' into an int.
    Returns None if it can't parse.
    """
    if not mileage_str:
        return None
    return parse_price_to_int(mileage_str)


def parse_year(year_str):
    """Return the first plausible four-digit year as an int, or None."""
    if not year_str:
        return None
    year = first_group(YEAR_REGEX, year_str)
    return int(year) if year else None
