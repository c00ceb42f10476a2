import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class HTTPLogMiddleware(BaseHTTPMiddleware):
    """Logs every request with its duration and exposes it as ``X-Process-Time-Ms``."""

    def __init__(self, app, logger_name: str = "peerreview.http"):
        super().__init__(app)
        self._logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method, path = request.method, request.url.path
        self._logger.debug("http.request start method=%s path=%s", method, path)
        try:
            response: Response = await call_next(request)
        except Exception as e:
            self._logger.warning("http.request error method=%s path=%s dur_ms=%d err=%r",
                                 method, path, _elapsed_ms(start), e)
            raise
        dur_ms = _elapsed_ms(start)
        response.headers["X-Process-Time-Ms"] = str(dur_ms)
        self._logger.debug("http.request end method=%s path=%s status=%s dur_ms=%d",
                           method, path, response.status_code, dur_ms)
        return response


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
