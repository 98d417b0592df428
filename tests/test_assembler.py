import pytest

from car_chat_parser.assembler import ResponseParser, assemble
from car_chat_parser.heading_keywords import HeadingClassifier
from car_chat_parser.models import ListingDetails, Source
from car_chat_parser.websites import WebsiteRegistry


@pytest.mark.parametrize("text", [
    "",
    "Just some text with no headings.",
    "Make: Toyota\n[here](https://www.carzone.ie/x)",
    "#hashtag and #### deep heading\nPrice: €5,000",
])
def test_no_headings_means_no_details(text):
    response = assemble(text)
    assert response.details is None
    assert response.sources == ()
    assert response.text == text


def test_sample_reply(parser, sample_reply):
    response = parser.parse(sample_reply)

    assert response.text == sample_reply
    assert response.details.make == "Toyota"
    assert response.details.monthly_from == "€320"
    # explicit sources keep the link URL, no fallback is added
    assert response.sources == (
        Source("Carzone", "https://www.carzone.ie/used-cars/toyota/corolla/fpa/123", "/logos/carzone.png"),
    )


def test_source_and_price_only():
    text = (
        "## Source\n"
        "[Check it out](https://cars.ie/ad/9)\n"
        "\n"
        "## Car Details\n"
        "Price: €20,000\n"
    )
    response = assemble(text)

    assert response.sources == (Source("Cars Ireland", "https://cars.ie/ad/9", "/logos/carsireland.png"),)
    assert response.details == ListingDetails(price="€20,000")


def test_fallback_source_from_listing_url():
    text = (
        "## Car Details\n"
        "**Make:** Ford\n"
        "View the listing: https://www.donedeal.ie/cars-for-sale/ford-focus/555\n"
    )
    response = assemble(text)

    assert response.details.url == "https://www.donedeal.ie/cars-for-sale/ford-focus/555"
    assert response.sources == (Source("DoneDeal", "https://www.donedeal.ie", "/logos/donedeal.png"),)


def test_no_fallback_for_unknown_site():
    response = assemble("## Car Details\nListing URL: https://example.com/car/1\n")
    assert response.details == ListingDetails(url="https://example.com/car/1")
    assert response.sources == ()


def test_last_details_section_wins():
    text = (
        "## Car Details\n"
        "Make: Audi\n"
        "Model: A4\n"
        "\n"
        "## Listing Details\n"
        "Make: BMW\n"
    )
    response = assemble(text)
    assert response.details == ListingDetails(make="BMW")


def test_details_section_without_fields():
    response = assemble("## Car Details\nNothing to report.\n")
    assert response.details is None
    assert response.sources == ()


def test_source_sections_accumulate_in_order():
    text = (
        "## Sources\n"
        "[DoneDeal](https://www.donedeal.ie/a)\n"
        "## Summary\n"
        "[Ignored](https://www.cars.ie/ignored)\n"
        "## More from Carzone\n"
        "[Listing](https://www.carzone.ie/b)\n"
    )
    response = assemble(text)
    assert [s.name for s in response.sources] == ["DoneDeal", "Carzone"]


def test_links_outside_sections_are_not_sources():
    response = assemble("See [Carzone](https://www.carzone.ie/x)\n## Summary\nA nice car.\n")
    assert response.sources == ()


def test_idempotent(sample_reply):
    first = assemble(sample_reply)
    assert assemble(first.text) == first


def test_injected_registry_and_classifier():
    registry = WebsiteRegistry.from_config({
        "autotrader": {"name": "AutoTrader", "domain": "autotrader.ie", "base_url": "https://www.autotrader.ie"},
    })
    parser = ResponseParser(registry, HeadingClassifier(details_keywords=["the car"]))
    response = parser.parse("# The Car\nMake: Nissan\n[here](https://m.autotrader.ie/ad/3)\n")

    assert response.details == ListingDetails(make="Nissan", url="https://m.autotrader.ie/ad/3")
    assert response.sources == (Source("AutoTrader", "https://www.autotrader.ie"),)


def test_to_dict(sample_reply):
    data = assemble(sample_reply).to_dict()
    assert data["text"] == sample_reply
    assert data["details"]["monthlyFrom"] == "€320"
    assert data["sources"][0]["name"] == "Carzone"


def test_none_text_is_treated_as_empty(parser):
    assert parser.parse(None).text == ""
