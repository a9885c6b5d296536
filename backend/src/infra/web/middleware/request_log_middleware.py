import logging
from time import perf_counter
from uuid import uuid4

import structlog
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from structlog.contextvars import bind_contextvars, clear_contextvars

request_logger = structlog.stdlib.get_logger("infra.web.request")


class RequestLogMiddleware:
    """Binds a request id to the logging context and logs one summary event per HTTP request."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        request_id_header: str = "x-request-id",
        excluded_paths: set[str] | None = None,
    ) -> None:
        self.app = app
        self.request_id_header = request_id_header.lower()
        self.excluded_paths = excluded_paths or set()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope.get("path", "") in self.excluded_paths:
            await self.app(scope, receive, send)
            return

        started_at = perf_counter()
        method = str(scope.get("method", ""))
        path = str(scope.get("path", ""))
        request_id = self._extract_header(scope, self.request_id_header) or str(uuid4())
        status_code: int | None = None

        bind_contextvars(request_id=request_id, http_method=method, http_path=path)

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code

            if message["type"] == "http.response.start":
                status_code = int(message.get("status", 200))

                headers = [
                    (key, value)
                    for key, value in message.get("headers", [])
                    if key.lower() != self.request_id_header.encode("latin-1")
                ]
                headers.append((self.request_id_header.encode("latin-1"), request_id.encode("latin-1")))
                message = {**message, "headers": headers}

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            request_logger.exception(
                "http_request",
                method=method,
                path=path,
                status_code=status_code or 500,
                duration_ms=self._elapsed_ms(started_at),
            )
            raise
        else:
            final_status = status_code or 200
            request_logger.log(
                self._status_to_log_level(final_status),
                "http_request",
                method=method,
                path=path,
                status_code=final_status,
                duration_ms=self._elapsed_ms(started_at),
            )
        finally:
            clear_contextvars()

    def _extract_header(self, scope: Scope, header_name: str) -> str | None:
        for raw_key, raw_value in scope.get("headers", []):
            if raw_key.decode("latin-1").lower() == header_name:
                return raw_value.decode("latin-1")

        return None

    def _status_to_log_level(self, status_code: int) -> int:
        # Client errors are expected traffic, not service failures.
        if status_code < 500:
            return logging.INFO

        return logging.ERROR

    def _elapsed_ms(self, started_at: float) -> float:
        return round((perf_counter() - started_at) * 1000, 3)
