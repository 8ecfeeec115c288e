import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, duration and user-agent of every request."""

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        user_agent = request.headers.get("user-agent", "-")
        logger.info(
            f">>> {request.method} {request.url.path} - {response.status_code} "
            f"{duration_ms:.2f}ms {user_agent}"
        )
        return response
