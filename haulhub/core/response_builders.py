from typing import Optional
from fastapi import HTTPException
from haulhub.models.job import Job
from haulhub.schemas.job import JobOut
from haulhub.schemas.quote import PriceQuote, QuoteResponse
from haulhub.core.tariffs import TARIFF_TABLE_VERSION
from haulhub.services.formatting import format_crypto_price, format_local_price


def build_quote_response(quote: PriceQuote) -> QuoteResponse:
    return QuoteResponse(
        quote=quote,
        formatted_local_price=format_local_price(quote),
        formatted_crypto_price=format_crypto_price(quote),
        tariff_version=TARIFF_TABLE_VERSION,
    )


def build_job_response(job: Job) -> JobOut:
    return JobOut(
        id=job.id,
        poster_id=job.poster_id,
        title=job.title,
        description=job.description,
        pickup=job.pickup,
        dropoff=job.dropoff,
        distance=job.distance,
        weight=job.weight,
        is_rush=job.is_rush,
        vehicle_type=job.vehicle_type,
        region=job.region,
        price_usd=job.price_usd,
        local_currency_price=job.local_currency_price,
        price=job.price,
        status=job.status,
        claimed_by=job.claimed_by,
        posted_at=job.posted_at,
        claimed_at=job.claimed_at,
        completed_at=job.completed_at,
    )


def build_job_response_list(jobs: list) -> list:
    return [build_job_response(job) for job in jobs]


def check_not_found(item, resource_name: str = "Resource", resource_id: Optional[str] = None) -> None:

    if not item:
        if resource_id:
            raise HTTPException(
                status_code=404,
                detail=f"{resource_name} with id {resource_id} not found"
            )
        raise HTTPException(status_code=404, detail=f"{resource_name} not found")
