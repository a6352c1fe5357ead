"""Health check endpoints for monitoring the application status."""

import logging

import redis
from django.conf import settings
from django.db import connection
from django.http import JsonResponse
from django.views.decorators.cache import cache_page
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


def check_database() -> dict[str, bool | str]:
    """Check database connectivity by executing a simple query."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            return {"status": True, "message": "Database connection successful"}
    except Exception as e:
        logger.error(f"Database health check failed: {e!s}")
        return {"status": False, "message": f"Database error: {e!s}"}


def check_broker() -> dict[str, bool | str]:
    """Check the Celery broker when it is Redis; other brokers are skipped."""
    broker_url = getattr(settings, "CELERY_BROKER_URL", "") or ""
    if not broker_url.startswith(("redis://", "rediss://")):
        return {"status": True, "message": "Broker check skipped"}
    try:
        redis.from_url(broker_url).ping()
        return {"status": True, "message": "Redis connection successful"}
    except redis.RedisError as e:
        logger.error(f"Redis health check failed: {e!s}")
        return {"status": False, "message": f"Redis error: {e!s}"}


@require_GET
@cache_page(30)
def health_check(request) -> JsonResponse:
    """Basic health check endpoint that validates core system components.

    Returns HTTP 200 if all systems are operational, HTTP 500 otherwise.
    """
    checks = [
        {"name": "database", "result": check_database()},
        {"name": "broker", "result": check_broker()},
    ]
    is_healthy = all(check["result"]["status"] for check in checks)

    response_data = {
        "status": "healthy" if is_healthy else "unhealthy",
        "version": getattr(settings, "APP_VERSION", "dev"),
        "checks": checks,
    }
    return JsonResponse(response_data, status=200 if is_healthy else 500)


@require_GET
def readiness_check(request) -> JsonResponse:
    """Readiness check endpoint to determine if the app can accept traffic."""
    db_check = check_database()
    if db_check["status"]:
        return JsonResponse({"status": "ready"})
    return JsonResponse(
        {"status": "not ready", "reasons": [f"Database: {db_check['message']}"]},
        status=503,
    )
