from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from k8s_controller.logging import get_logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, logger=None):
        super().__init__(app)
        self.logger = logger or get_logger("k8s_controller.api")

    async def dispatch(self, request: Request, call_next):
        self.logger.info(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        self.logger.debug("Response", path=request.url.path, status=response.status_code)
        return response
