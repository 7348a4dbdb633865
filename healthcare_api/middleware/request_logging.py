import time
import uuid

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from healthcare_api.core.exceptions import unhandled_exception_handler


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log line per request, correlated by X-Request-ID"""

    EXCLUDED_ROUTES = ["/api-docs", "/redoc", "/swagger.json", "/health"]

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            response = await unhandled_exception_handler(request, exc)

        response.headers["X-Request-ID"] = request_id
        if not any(request.url.path.startswith(route) for route in self.EXCLUDED_ROUTES):
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "{} {} -> {} ({:.1f} ms) [{}]",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                request_id,
            )
        return response
