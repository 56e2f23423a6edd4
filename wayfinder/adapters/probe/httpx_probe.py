"""httpx liveness probe — implements LivenessProbePort."""

from __future__ import annotations

import logging
import time

import httpx

from wayfinder.application.ports.liveness_probe import LivenessProbePort
from wayfinder.domain.value_objects.endpoint import ProbeAttempt
from wayfinder.domain.value_objects.enums import ProbeFailure

logger = logging.getLogger(__name__)


def classify_http_status(status_code: int) -> ProbeFailure | None:
    """None for 2xx, else the failure kind for the status code."""
    if 200 <= status_code < 300:
        return None
    if status_code >= 500:
        return ProbeFailure.SERVER_ERROR
    return ProbeFailure.HTTP_ERROR


def classify_transport_error(exc: Exception) -> ProbeFailure:
    if isinstance(exc, httpx.TimeoutException):
        return ProbeFailure.TIMEOUT
    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
        return ProbeFailure.NO_CONNECTION
    return ProbeFailure.UNKNOWN


class HttpxLivenessProbe(LivenessProbePort):
    """GET the probe URL once; only the status code matters, the body is ignored."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def probe(self, host: str, url: str, timeout_s: float) -> ProbeAttempt:
        t0 = time.perf_counter()
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=timeout_s) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        except Exception as exc:
            failure = classify_transport_error(exc)
            logger.debug("Probe %s failed (%s): %s", url, failure.value, exc)
            return ProbeAttempt(
                host=host,
                url=url,
                ok=False,
                failure=failure,
                elapsed_ms=_elapsed_ms(t0),
            )

        failure = classify_http_status(response.status_code)
        return ProbeAttempt(
            host=host,
            url=url,
            ok=failure is None,
            status_code=response.status_code,
            failure=failure,
            elapsed_ms=_elapsed_ms(t0),
        )


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)
