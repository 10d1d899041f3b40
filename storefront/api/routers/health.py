# storefront/api/routers/health.py
from datetime import datetime, timezone
from typing import Any, Dict, Generator

import redis
from redis.exceptions import RedisError
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.utils.logging import get_logger
from storefront.utils.settings import REDIS_URL

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def get_redis() -> Generator[redis.Redis, None, None]:
    client = redis.Redis.from_url(REDIS_URL, socket_connect_timeout=1, socket_timeout=1)
    try:
        yield client
    finally:
        client.close()


@router.get("")
def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/ready")
def readiness_check(
    db: Session = Depends(get_db),
    cache: redis.Redis = Depends(get_redis),
) -> Dict[str, Any]:
    status = {"status": "healthy", "components": {}}

    try:
        db.execute(text("SELECT 1"))
        status["components"]["database"] = {"status": "healthy"}
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        status["components"]["database"] = {"status": "unhealthy", "error": str(e)}
        status["status"] = "unhealthy"

    #redis only carries the celery broker, the api keeps working without it
    try:
        cache.ping()
        status["components"]["redis"] = {"status": "healthy"}
    except RedisError as e:
        logger.warning(f"Redis health check failed: {e}")
        status["components"]["redis"] = {"status": "unhealthy", "error": str(e)}
        if status["status"] == "healthy":
            status["status"] = "degraded"

    return status
