import logging
import time
from fastapi import Request

logger = logging.getLogger("src.api.access")


async def log_requests(request: Request, call_next):
    """Log method, path, status code and latency of every request"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
    )
    return response
