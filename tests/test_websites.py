import logging

import pytest

from car_chat_parser.websites import WebsiteRegistry, hostname_of, load_websites_from_csv


def test_resolves_www_host(registry):
    site = registry.resolve("https://www.carzone.ie/used-cars/123")
    assert site.name == "Carzone"
    assert site.base_url == "https://www.carzone.ie"
    assert site.icon == "/logos/carzone.png"


def test_resolves_subdomain(registry):
    assert registry.resolve("https://m.donedeal.ie/x").name == "DoneDeal"


def test_resolves_bare_domain(registry):
    assert registry.resolve("https://cars.ie/ad/9").name == "Cars Ireland"


def test_host_matching_is_case_insensitive(registry):
    assert registry.resolve("https://WWW.DoneDeal.IE/cars").name == "DoneDeal"


def test_lookalike_domain_is_unknown(registry):
    assert registry.resolve("https://notcars.ie/ad/1") is None
    assert registry.resolve("https://carzone.ie.example.com/") is None


def test_unknown_site(registry):
    assert registry.resolve("https://example.com/car") is None


def test_malformed_url_is_logged_not_raised(registry, caplog):
    with caplog.at_level(logging.WARNING, logger="car_chat_parser.websites"):
        assert registry.resolve("not a url") is None
        assert registry.resolve("http://[::1") is None
    assert "Error parsing URL" in caplog.text


def test_hostname_strips_only_leading_www():
    assert hostname_of("https://www.donedeal.ie/a") == "donedeal.ie"
    assert hostname_of("https://shop.www.example.com/") == "shop.www.example.com"


def test_from_config_with_custom_site():
    registry = WebsiteRegistry.from_config({
        "autotrader": {
            "name": "AutoTrader",
            "domain": "AutoTrader.co.uk",
            "base_url": "https://www.autotrader.co.uk/",
        }
    })
    site = registry.resolve("https://m.autotrader.co.uk/car-details/1")
    assert site.name == "AutoTrader"
    assert site.base_url == "https://www.autotrader.co.uk"
    assert site.icon is None
    assert len(registry) == 1


def test_from_config_rejects_missing_field():
    with pytest.raises(ValueError, match="missing"):
        WebsiteRegistry.from_config({"broken": {"name": "Broken", "base_url": "https://broken.ie"}})


def test_from_config_rejects_bad_base_url():
    with pytest.raises(ValueError):
        WebsiteRegistry.from_config({"bad": {"name": "Bad", "domain": "bad.ie", "base_url": "bad.ie"}})


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry.entries["new"] = registry.get("carzone")


def test_load_websites_from_csv(tmp_path):
    csv_path = tmp_path / "sites.csv"
    csv_path.write_text(
        "key,name,domain,base_url,icon\n"
        "autotrader,AutoTrader,autotrader.ie,https://www.autotrader.ie,/logos/autotrader.png\n"
        "nohttp,No Scheme,noscheme.ie,noscheme.ie,\n"
        ",Missing Key,missing.ie,https://missing.ie,\n",
        encoding="utf-8",
    )

    websites = load_websites_from_csv(str(csv_path))

    assert list(websites) == ["autotrader"]
    assert websites["autotrader"]["icon"] == "/logos/autotrader.png"


def test_load_websites_from_csv_requires_columns(tmp_path):
    csv_path = tmp_path / "sites.csv"
    csv_path.write_text("name,url\nA,https://a.ie\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_websites_from_csv(str(csv_path))


def test_load_websites_from_missing_csv(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_websites_from_csv(str(tmp_path / "nope.csv"))
