"""Regional price computation.

The single implementation of the HaulHub pricing formula. Web handlers,
previews and the escrow funding path all call ``compute_price``.
"""
import math
import numbers
from typing import Any, Optional

from haulhub.core.enums import ECO_VEHICLES
from haulhub.core.exceptions import InvalidInputError
from haulhub.core.tariffs import get_tariff
from haulhub.schemas.quote import PriceQuote

# Quotients are rounded to this many places before ceil() so float noise
# such as 2.0000000000000004 does not bill an extra tier.
_PRECISION = 12


def _require_positive(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(field)
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(field)
    return value


def _ceil_units(amount: float, step: float) -> int:
    return math.ceil(round(amount / step, _PRECISION))


def _tiered_charge(amount: float, allowance: float, step: float, increment: float) -> float:
    """Charge for the part of ``amount`` above ``allowance``. Partial steps bill in full."""
    if amount <= allowance:
        return 0.0
    return _ceil_units(amount - allowance, step) * increment


def is_eco_vehicle(vehicle_type: Optional[str]) -> bool:
    if not isinstance(vehicle_type, str):
        return False
    return vehicle_type.lower() in ECO_VEHICLES


def round_up_to_half(price: float) -> float:
    return _ceil_units(price, 0.5) / 2


def compute_price(
    region: Optional[str],
    distance: Any,
    weight: Any,
    is_rush: Optional[bool] = False,
    vehicle_type: Optional[str] = "car",
) -> PriceQuote:
    distance = _require_positive("distance", distance)
    weight = _require_positive("weight", weight)

    tariff = get_tariff(region)

    distance_charge = _tiered_charge(
        distance, tariff.base_distance, tariff.distance_step, tariff.distance_increment
    )
    weight_charge = _tiered_charge(
        weight, tariff.base_weight, tariff.weight_step, tariff.weight_increment
    )
    subtotal = tariff.base_rate + distance_charge + weight_charge
    price = subtotal

    # rush applies before the eco discount
    rush_multiplier = tariff.rush_multiplier if is_rush else 1.0
    price *= rush_multiplier

    eco_discount = tariff.eco_discount if is_eco_vehicle(vehicle_type) else 0.0
    price *= 1 - eco_discount

    price = round_up_to_half(price)

    return PriceQuote(
        region_code=tariff.region_code,
        base_rate=tariff.base_rate,
        distance_charge=distance_charge,
        weight_charge=weight_charge,
        subtotal=subtotal,
        rush_multiplier=rush_multiplier,
        eco_discount_applied=eco_discount,
        price_usd=price,
        crypto_price=price,
        local_currency_price=price * tariff.exchange_rate,
        exchange_rate=tariff.exchange_rate,
        currency_code=tariff.currency_code,
        currency_symbol=tariff.currency_symbol,
        distance_unit=tariff.distance_unit,
        weight_unit=tariff.weight_unit,
    )
