from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class QuoteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    region: Optional[str] = "us"
    # untyped so the engine rejects booleans, strings and missing values per field
    distance: Any = None
    weight: Any = None
    is_rush: Optional[bool] = False
    vehicle_type: Optional[str] = "car"


class PriceQuote(BaseModel):
    """Outcome of one pricing calculation. Money amounts are USD unless named local."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    region_code: str

    base_rate: float
    distance_charge: float
    weight_charge: float
    subtotal: float

    rush_multiplier: float
    eco_discount_applied: float

    price_usd: float
    crypto_price: float
    local_currency_price: float
    exchange_rate: float

    currency_code: str
    currency_symbol: str
    distance_unit: str
    weight_unit: str


class QuoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    quote: PriceQuote
    formatted_local_price: str
    formatted_crypto_price: str
    tariff_version: str
