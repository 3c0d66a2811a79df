"""Pricing quote endpoints with Redis caching"""
import json
import logging
from typing import List
from fastapi import APIRouter, Request

from haulhub.schemas.quote import QuoteRequest, QuoteResponse
from haulhub.schemas.tariff import RegionOut, RegionTariff
from haulhub.services.pricing import compute_price, is_eco_vehicle
from haulhub.core.tariffs import get_tariff, list_regions, TARIFF_TABLE_VERSION
from haulhub.core.redis import get_redis
from haulhub.core.config import settings
from haulhub.core.metrics import cache_hits, cache_misses, quotes_computed
from haulhub.core.rate_limit import check_rate_limit
from haulhub.core.response_builders import build_quote_response
from haulhub.utils.hashing import payload_hash

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])


def _generate_cache_key(req: QuoteRequest) -> str:
    return payload_hash(req.model_dump(), prefix=f"price:{TARIFF_TABLE_VERSION}:")


@router.post("/calc", response_model=QuoteResponse)
async def calc_quote(req: QuoteRequest, request: Request):
    await check_rate_limit(request.client.host if request.client else "anonymous")

    cache_key = _generate_cache_key(req)
    redis = get_redis()

    if redis is not None:
        try:
            cached = await redis.get(cache_key)
            if cached:
                cache_hits.labels(cache="quote").inc()
                return QuoteResponse.model_validate(json.loads(cached))
            cache_misses.labels(cache="quote").inc()
        except Exception as e:
            logger.warning(f"Cache retrieval failed: {e}")

    quote = compute_price(req.region, req.distance, req.weight, req.is_rush, req.vehicle_type)
    quotes_computed.labels(
        region=quote.region_code,
        rush=str(bool(req.is_rush)).lower(),
        eco=str(is_eco_vehicle(req.vehicle_type)).lower(),
    ).inc()
    result = build_quote_response(quote)

    if redis is not None:
        try:
            await redis.set(
                cache_key,
                json.dumps(result.model_dump(by_alias=True), default=str),
                ex=settings.PRICE_CACHE_TTL
            )
        except Exception as e:
            logger.warning(f"Cache write failed: {e}")

    return result


@router.get("/regions", response_model=List[RegionOut])
async def get_regions():
    return list_regions()


@router.get("/regions/{region_code}", response_model=RegionTariff)
async def get_region_tariff(region_code: str):
    return get_tariff(region_code)
