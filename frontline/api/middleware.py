import asyncio
import time
import os
from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger = request.app.state.logger
        start_time = time.time()
        request_id = os.urandom(8).hex()
        request.state.request_id = request_id

        request_uri = request.url.path
        if request.url.query:
            request_uri += "?" + request.url.query

        # Sink writes block on flock; keep them off the event loop
        await asyncio.to_thread(logger.info, "Front controller reached", {
            "request_id": request_id,
            "request_uri": request_uri,
            "method": request.method,
        })

        try:
            response = await call_next(request)
        except Exception as e:
            # Log unexpected exception
            await asyncio.to_thread(logger.error, "Unexpected error", {
                "request_id": request_id,
                "exception": str(e),
                "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            })
            raise

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        # HTTPExceptions arrive here as responses; their status is logged below
        await asyncio.to_thread(logger.info, "Response sent", {
            "request_id": request_id,
            "status_code": response.status_code,
            "duration_ms": round(process_time * 1000),
        })

        return response
