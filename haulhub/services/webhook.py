import httpx
import asyncio
import logging
from typing import Optional
from haulhub.core.config import settings
from haulhub.core.metrics import webhook_deliveries

logger = logging.getLogger(__name__)


async def send_webhook(
    payload: dict,
    retries: int | None = None,
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """POST a job event to WEBHOOK_URL, retrying with exponential backoff"""
    if not settings.WEBHOOK_URL:
        logger.debug(f"WEBHOOK_URL not set, skipping event for job {payload.get('jobId')}")
        return False

    if retries is None:
        retries = settings.WEBHOOK_RETRIES

    backoff = 1.0

    for attempt in range(1, retries + 1):
        try:
            if client is None:
                async with httpx.AsyncClient(timeout=settings.WEBHOOK_TIMEOUT) as http:
                    response = await http.post(settings.WEBHOOK_URL, json=payload)
            else:
                response = await client.post(settings.WEBHOOK_URL, json=payload)

            if 200 <= response.status_code < 300:
                webhook_deliveries.labels(status="success").inc()
                logger.info(f"Webhook delivery succeeded for job {payload.get('jobId')}")
                return True
            logger.warning(
                f"Webhook delivery failed (attempt {attempt}/{retries}): "
                f"Status {response.status_code} for job {payload.get('jobId')}"
            )
        except httpx.TimeoutException:
            logger.warning(
                f"Webhook timeout (attempt {attempt}/{retries}) for job {payload.get('jobId')}"
            )
        except httpx.HTTPError as e:
            logger.warning(
                f"Webhook delivery error (attempt {attempt}/{retries}): {e} "
                f"for job {payload.get('jobId')}"
            )

        if attempt < retries:
            await asyncio.sleep(backoff)
            backoff *= 2.0

    webhook_deliveries.labels(status="failed").inc()
    logger.error(f"Webhook delivery failed after {retries} attempts for job {payload.get('jobId')}")
    return False
