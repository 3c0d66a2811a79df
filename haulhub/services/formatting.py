"""Currency and unit display helpers built on the tariff table"""
from typing import Dict, Optional

from haulhub.core.config import settings
from haulhub.core.tariffs import REGION_TARIFFS, get_tariff
from haulhub.schemas.quote import PriceQuote


def _exchange_rates() -> Dict[str, float]:
    rates = {"USD": 1.0}
    for tariff in REGION_TARIFFS.values():
        rates.setdefault(tariff.currency_code, tariff.exchange_rate)
    return rates


EXCHANGE_RATES = _exchange_rates()


def _money(amount: float) -> str:
    return f"{amount:,.2f}"


def format_price(amount: float, region: Optional[str]) -> str:
    return f"{get_tariff(region).currency_symbol}{_money(amount)}"


def format_local_price(quote: PriceQuote) -> str:
    return f"{quote.currency_symbol}{_money(quote.local_currency_price)}"


def format_crypto_price(quote: PriceQuote, symbol: Optional[str] = None) -> str:
    return f"{_money(quote.crypto_price)} {symbol or settings.STABLECOIN_SYMBOL}"


def convert_currency(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert through USD. Unknown currency codes are treated as USD-pegged."""
    amount_usd = amount if from_currency == "USD" else amount / EXCHANGE_RATES.get(from_currency, 1.0)
    return amount_usd * EXCHANGE_RATES.get(to_currency, 1.0)


def get_distance_unit(region: Optional[str]) -> str:
    return get_tariff(region).distance_unit


def get_weight_unit(region: Optional[str]) -> str:
    return get_tariff(region).weight_unit
