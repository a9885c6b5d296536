import os
import time
from typing import Any

import psutil
from fastapi import APIRouter, Request, Response, status

from infra.utils.clock import utc_now
from infra.utils.formatters import format_bytes, format_rfc3339, format_time

router = APIRouter(tags=["Health"])

_start_time: float = time.time()
_current_process: psutil.Process = psutil.Process(os.getpid())


@router.get(
    "/health",
    response_model=dict[str, Any],
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
)
async def get_health(request: Request, response: Response):
    payload: dict[str, Any] = {
        "status": "ok",
        "time": format_rfc3339(utc_now()),
        "app_name": request.app.title,
        "version": request.app.version,
        "uptime": format_time(time.time() - _start_time),
    }

    # Liveness never depends on process metrics.
    try:
        payload["ram"] = format_bytes(_current_process.memory_info().rss)
    except psutil.Error as e:
        payload["ram"] = None
        payload["ram_error"] = str(e)

    response.headers["Cache-Control"] = "no-store"

    return payload
