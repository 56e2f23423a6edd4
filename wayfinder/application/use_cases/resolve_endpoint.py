"""ResolveEndpointUseCase — pick the first reachable backend host in priority order."""

from __future__ import annotations

import logging

from wayfinder.application.ports.liveness_probe import LivenessProbePort
from wayfinder.domain.value_objects.endpoint import (
    EndpointProbeConfig,
    ProbeAttempt,
    ResolvedEndpoint,
)

logger = logging.getLogger(__name__)


class ResolveEndpointUseCase:
    """Sequentially probes candidate hosts and falls back when none answer."""

    def __init__(self, probe: LivenessProbePort):
        self._probe = probe

    async def execute(self, config: EndpointProbeConfig) -> ResolvedEndpoint:
        """Resolve one endpoint for ``config``.

        Pipeline:
        1. Probe candidates strictly in order (never in parallel)
        2. Stop at the first 2xx answer and return that host
        3. Otherwise return the fallback host, flagged as degraded

        Probe failures are final for a candidate within one pass.
        """
        attempts: list[ProbeAttempt] = []

        for host in config.candidates:
            url = config.probe_url(host)
            attempt = await self._probe.probe(host, url, config.timeout_s)
            attempts.append(attempt)

            if attempt.ok:
                logger.info(
                    "Backend found at %s (status=%s, %d ms)",
                    url, attempt.status_code, attempt.elapsed_ms,
                )
                return ResolvedEndpoint(
                    host=host,
                    port=config.port,
                    secure=config.secure,
                    fallback_used=False,
                    attempts=tuple(attempts),
                )

            logger.debug(
                "Candidate %s unreachable: %s",
                url, attempt.failure.value if attempt.failure else "unknown",
            )

        resolved = ResolvedEndpoint(
            host=config.fallback,
            port=config.port,
            secure=config.secure,
            fallback_used=True,
            attempts=tuple(attempts),
        )
        logger.warning(
            "No candidate backend reachable (%d tried), using fallback %s",
            len(attempts), resolved.base_url,
        )
        return resolved
