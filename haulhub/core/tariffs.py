"""Regional tariff table.

The table ships with the service and is validated once at import; a broken
entry raises ``ConfigurationError`` before any quote can be served. Lookups
never fail: an unknown, empty or missing region code resolves to the
``us`` tariff.
"""
import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from haulhub.core.exceptions import ConfigurationError
from haulhub.schemas.tariff import RegionOut, RegionTariff

logger = logging.getLogger(__name__)

TARIFF_TABLE_VERSION = "2024.1"
FALLBACK_REGION = "us"

# Distance increments are billed per 2 units everywhere. Weight increments
# are billed per 5 kg in metric regions and per 10 lbs in imperial ones.
RAW_TARIFFS: Dict[str, Dict[str, Any]] = {
    # Southeast Asia
    "ph": {
        "name": "Philippines",
        "currency_code": "PHP",
        "currency_symbol": "₱",
        "base_rate": 2.00,
        "base_distance": 3,
        "distance_increment": 0.50,
        "distance_step": 2,
        "base_weight": 5,
        "weight_increment": 0.75,
        "weight_step": 5,
        "rush_multiplier": 1.3,
        "eco_discount": 0.10,
        "max_distance": 10,
        "max_weight": 30,
        "exchange_rate": 56.50,
    },
    "id": {
        "name": "Indonesia",
        "currency_code": "IDR",
        "currency_symbol": "Rp",
        "base_rate": 1.75,
        "base_distance": 3,
        "distance_increment": 0.40,
        "distance_step": 2,
        "base_weight": 5,
        "weight_increment": 0.70,
        "weight_step": 5,
        "rush_multiplier": 1.35,
        "eco_discount": 0.10,
        "max_distance": 10,
        "max_weight": 30,
        "exchange_rate": 15500.00,
    },
    "vn": {
        "name": "Vietnam",
        "currency_code": "VND",
        "currency_symbol": "₫",
        "base_rate": 1.80,
        "base_distance": 3,
        "distance_increment": 0.45,
        "distance_step": 2,
        "base_weight": 5,
        "weight_increment": 0.70,
        "weight_step": 5,
        "rush_multiplier": 1.3,
        "eco_discount": 0.15,
        "max_distance": 12,
        "max_weight": 30,
        "exchange_rate": 24800.00,
    },
    # Europe
    "eu": {
        "name": "Europe",
        "currency_code": "EUR",
        "currency_symbol": "€",
        "base_rate": 5.00,
        "base_distance": 5,
        "distance_increment": 1.00,
        "distance_step": 2,
        "base_weight": 10,
        "weight_increment": 2.00,
        "weight_step": 5,
        "rush_multiplier": 1.5,
        "eco_discount": 0.15,
        "max_distance": 15,
        "max_weight": 50,
        "exchange_rate": 0.92,
    },
    "uk": {
        "name": "United Kingdom",
        "currency_code": "GBP",
        "currency_symbol": "£",
        "base_rate": 5.50,
        "base_distance": 5,
        "distance_increment": 1.10,
        "distance_step": 2,
        "base_weight": 10,
        "weight_increment": 2.20,
        "weight_step": 5,
        "rush_multiplier": 1.5,
        "eco_discount": 0.15,
        "max_distance": 15,
        "max_weight": 50,
        "exchange_rate": 0.77,
    },
    # North America
    "us": {
        "name": "United States",
        "currency_code": "USD",
        "currency_symbol": "$",
        "base_rate": 5.00,
        "base_distance": 5,      # miles
        "distance_increment": 1.00,
        "distance_step": 2,
        "base_weight": 10,       # lbs
        "weight_increment": 2.00,
        "weight_step": 10,
        "rush_multiplier": 1.5,
        "eco_discount": 0.10,
        "max_distance": 15,
        "max_weight": 50,
        "uses_imperial": True,
        "exchange_rate": 1.00,
    },
    "ca": {
        "name": "Canada",
        "currency_code": "CAD",
        "currency_symbol": "C$",
        "base_rate": 5.00,
        "base_distance": 5,
        "distance_increment": 1.00,
        "distance_step": 2,
        "base_weight": 10,
        "weight_increment": 2.00,
        "weight_step": 5,
        "rush_multiplier": 1.5,
        "eco_discount": 0.10,
        "max_distance": 15,
        "max_weight": 50,
        "exchange_rate": 1.36,
    },
}


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )


def load_tariffs(raw: Mapping[str, Mapping[str, Any]]) -> Mapping[str, RegionTariff]:
    """Validate raw tariff records and return a read-only table keyed by region code."""
    table: Dict[str, RegionTariff] = {}

    for code, fields in raw.items():
        declared = fields.get("region_code", code)
        if declared != code:
            raise ConfigurationError(code, f"keyed as '{code}' but declares region_code '{declared}'")
        unknown = sorted(set(fields) - set(RegionTariff.model_fields))
        if unknown:
            raise ConfigurationError(code, f"unknown fields: {', '.join(unknown)}")
        try:
            table[code] = RegionTariff(**{**fields, "region_code": code})
        except ValidationError as e:
            raise ConfigurationError(code, _describe(e)) from e

    if FALLBACK_REGION not in table:
        raise ConfigurationError(None, f"fallback region '{FALLBACK_REGION}' is missing")

    return MappingProxyType(table)


REGION_TARIFFS = load_tariffs(RAW_TARIFFS)


def get_tariff(region_code: Optional[str]) -> RegionTariff:
    if isinstance(region_code, str) and region_code in REGION_TARIFFS:
        return REGION_TARIFFS[region_code]
    logger.debug(f"Unknown region {region_code!r}, falling back to '{FALLBACK_REGION}'")
    return REGION_TARIFFS[FALLBACK_REGION]


def list_regions() -> List[RegionOut]:
    return [
        RegionOut(
            code=code,
            name=tariff.name,
            currency_code=tariff.currency_code,
            currency_symbol=tariff.currency_symbol,
            distance_unit=tariff.distance_unit,
            weight_unit=tariff.weight_unit,
            max_distance=tariff.max_distance,
            max_weight=tariff.max_weight,
        )
        for code, tariff in REGION_TARIFFS.items()
    ]
