import logging
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request
from typing import Optional, List

from haulhub.models.job import Job
from haulhub.schemas.job import JobCreate, JobOut, HaulerAction
from haulhub.services.jobs import JobStore, get_job_store
from haulhub.services.pricing import compute_price
from haulhub.services.webhook import send_webhook
from haulhub.core.rate_limit import check_rate_limit
from haulhub.core.metrics import jobs_created
from haulhub.core.response_builders import build_job_response, build_job_response_list, check_not_found
from haulhub.core.enums import JobStatus
from haulhub.utils.idempotency import get_idempotent, set_idempotent

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


def _client_id(request: Request) -> str:
    return request.client.host if request.client else "anonymous"


async def _notify_status(job: Job) -> None:
    await send_webhook({
        "jobId": job.id,
        "status": str(job.status),
        "priceUsd": job.price.price_usd,
        "cryptoPrice": job.price.crypto_price,
    })


@router.post("/", response_model=JobOut, status_code=201)
async def create_job(
    payload: JobCreate,
    request: Request,
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
    store: JobStore = Depends(get_job_store),
):
    await check_rate_limit(_client_id(request))

    if idempotency_key:
        previous = await get_idempotent(idempotency_key)
        if previous is not None:
            logger.info(f"Replaying job {previous.get('id')} for idempotency key {idempotency_key}")
            return JobOut.model_validate(previous)

    quote = compute_price(
        payload.region, payload.distance, payload.weight, payload.is_rush, payload.vehicle_type
    )

    job = store.add(Job(
        poster_id=payload.poster_id,
        title=payload.title,
        description=payload.description,
        pickup=payload.pickup,
        dropoff=payload.dropoff,
        distance=float(payload.distance),
        weight=float(payload.weight),
        is_rush=payload.is_rush,
        vehicle_type=payload.vehicle_type,
        region=quote.region_code,
        price=quote,
    ))
    jobs_created.labels(region=quote.region_code).inc()
    logger.info(f"Job {job.id} posted in region {job.region} at {quote.price_usd} USD")

    response = build_job_response(job)
    if idempotency_key:
        await set_idempotent(idempotency_key, response.model_dump(mode="json", by_alias=True))

    return response


@router.get("/", response_model=List[JobOut])
async def list_jobs(
    status: Optional[JobStatus] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: JobStore = Depends(get_job_store),
):
    return build_job_response_list(store.list(status=status, limit=limit, offset=offset))


@router.get("/{job_id}", response_model=JobOut)
async def get_job(job_id: str, store: JobStore = Depends(get_job_store)):
    job = store.get(job_id)
    check_not_found(job, "Job", job_id)
    return build_job_response(job)


@router.post("/{job_id}/claim", response_model=JobOut)
async def claim_job(
    job_id: str,
    payload: HaulerAction,
    request: Request,
    store: JobStore = Depends(get_job_store),
):
    await check_rate_limit(_client_id(request))

    job = store.get(job_id)
    check_not_found(job, "Job", job_id)

    if job.claimed_by is not None:
        raise HTTPException(status_code=400, detail="Job has already been claimed")

    job.claim(payload.hauler_id)
    await _notify_status(job)

    return build_job_response(job)


@router.post("/{job_id}/complete", response_model=JobOut)
async def complete_job(
    job_id: str,
    payload: HaulerAction,
    request: Request,
    store: JobStore = Depends(get_job_store),
):
    await check_rate_limit(_client_id(request))

    job = store.get(job_id)
    check_not_found(job, "Job", job_id)

    if job.claimed_by is None:
        raise HTTPException(status_code=400, detail="Job has not been claimed yet")
    if job.status == JobStatus.COMPLETED:
        raise HTTPException(status_code=400, detail="Job is already completed")
    if job.claimed_by != payload.hauler_id:
        raise HTTPException(status_code=403, detail="You are not authorized to complete this job")

    job.complete()
    await _notify_status(job)

    return build_job_response(job)
