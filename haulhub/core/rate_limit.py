import logging
from fastapi import HTTPException
from haulhub.core.redis import get_redis
from haulhub.core.config import settings
from haulhub.core.metrics import rate_limit_exceeded

logger = logging.getLogger(__name__)

async def check_rate_limit(client_id: str):
    redis = get_redis()
    if redis is None:
        return
    key = f"rl:{client_id}"
    try:
        current = await redis.get(key)
        if current is None:
            await redis.set(key, "1", ex=settings.RATE_LIMIT_WINDOW)
            return
        count = int(current)
        if count < settings.RATE_LIMIT:
            await redis.incr(key)
            return
    except Exception as e:
        logger.warning(f"Rate limit check failed for {client_id}: {e}")
        return
    rate_limit_exceeded.inc()
    raise HTTPException(status_code=429, detail="Rate limit exceeded")
