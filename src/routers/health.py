import time
from typing import Any, Dict

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["health"])

START_TIME = time.monotonic()


def uptime() -> float:
    """Seconds since the gateway process started; never decreases."""
    return time.monotonic() - START_TIME


@router.get("/health")
def health_check() -> Dict[str, Any]:
    """Liveness probe - no upstream checks"""
    return {"status": "ok", "uptime": uptime()}


def metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
