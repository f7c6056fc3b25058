"""
EasyBusy B2B API client.

One request per call: no retries, no caching. Blocking I/O uses requests;
the async wrapper pushes it onto the threadpool so the event loop keeps
serving other sockets while an upstream round trip is in flight.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urljoin, urlsplit

import requests
from fastapi.concurrency import run_in_threadpool

from src.config import GatewayConfig
from src.errors import UpstreamError
from src.metrics import UPSTREAM_LATENCY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamCall:
    """A single EasyBusy request, built per dispatch."""

    path: str
    method: str = "GET"
    query: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Any] = None


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


class EasyBusyClient:
    def __init__(self, config: GatewayConfig):
        self.base_url = config.base_url
        self.timeout = config.timeout
        self._api_key = config.api_key

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-KEY": self._api_key,
        }

    def request(
        self,
        path: str,
        method: str = "GET",
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """
        Issue one request and return the parsed body.

        Non-JSON bodies from a successful response come back as raw text.
        Raises UpstreamError on any non-2xx status.
        """
        url = urljoin(self.base_url, path)
        params = {k: _stringify(v) for k, v in (query or {}).items() if v is not None}
        data = json.dumps(body) if body is not None else None

        start = time.perf_counter()
        try:
            # No Session: cookies and connections are never carried between calls
            res = requests.request(
                method,
                url,
                params=params or None,
                data=data,
                headers=self._headers(),
                timeout=self.timeout,
            )
        finally:
            UPSTREAM_LATENCY.labels(method=method).observe(time.perf_counter() - start)

        text = res.text
        if not 200 <= res.status_code < 300:
            raise UpstreamError(method, urlsplit(url).path, res.status_code, text)
        return _parse_body(text)

    def call(self, upstream: UpstreamCall) -> Any:
        return self.request(
            upstream.path, method=upstream.method, query=upstream.query, body=upstream.body
        )

    async def acall(self, upstream: UpstreamCall) -> Any:
        logger.debug(f"EasyBusy {upstream.method} {upstream.path}")
        return await run_in_threadpool(self.call, upstream)
