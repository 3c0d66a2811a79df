import pytest
from haulhub.services.formatting import (
    convert_currency,
    format_crypto_price,
    format_local_price,
    format_price,
    get_distance_unit,
    get_weight_unit,
)
from haulhub.services.pricing import compute_price

pytestmark = pytest.mark.unit


class TestPriceFormatting:

    def test_format_price_uses_region_symbol(self):
        assert format_price(1234.5, "ph") == "₱1,234.50"
        assert format_price(5, "ca") == "C$5.00"

    def test_format_price_falls_back_to_us(self):
        assert format_price(5, "nowhere") == "$5.00"

    def test_format_local_price(self):
        quote = compute_price("ph", 3, 5, True, "bike")
        assert format_local_price(quote) == "₱141.25"

    def test_local_price_rounded_for_display_only(self):
        quote = compute_price("eu", 5, 10, False, "car")
        assert quote.local_currency_price == pytest.approx(4.6)
        assert format_local_price(quote) == "€4.60"

    def test_format_crypto_price(self):
        quote = compute_price("ph", 3, 5, True, "bike")
        assert format_crypto_price(quote, "USDC") == "2.50 USDC"
        assert format_crypto_price(quote, "DAI") == "2.50 DAI"


class TestCurrencyConversion:

    def test_usd_to_local(self):
        assert convert_currency(100, "USD", "PHP") == pytest.approx(5650.0)

    def test_local_to_usd(self):
        assert convert_currency(56.5, "PHP", "USD") == pytest.approx(1.0)

    def test_cross_rate(self):
        assert convert_currency(0.92, "EUR", "GBP") == pytest.approx(0.77)

    def test_unknown_currency_treated_as_usd(self):
        assert convert_currency(10, "XYZ", "USD") == pytest.approx(10)
        assert convert_currency(10, "USD", "XYZ") == pytest.approx(10)


class TestUnits:

    @pytest.mark.parametrize("region,distance,weight", [
        ("us", "mi", "lbs"),
        ("uk", "km", "kg"),
        ("vn", "km", "kg"),
        (None, "mi", "lbs"),
    ])
    def test_units(self, region, distance, weight):
        assert get_distance_unit(region) == distance
        assert get_weight_unit(region) == weight
