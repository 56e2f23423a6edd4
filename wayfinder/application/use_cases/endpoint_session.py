"""EndpointSession — keep one resolved endpoint per session and re-detect on network change."""

from __future__ import annotations

import asyncio
import ipaddress
import logging

from wayfinder.application.use_cases.resolve_endpoint import ResolveEndpointUseCase
from wayfinder.domain.value_objects.endpoint import EndpointProbeConfig, ResolvedEndpoint

logger = logging.getLogger(__name__)


def network_id_from_ip(ip: str | None) -> str | None:
    """Derive a stable network identifier (the /24 prefix) from a device IPv4 address.

    Returns None for anything that is not a valid IPv4 address.
    """
    if not ip:
        return None
    try:
        address = ipaddress.IPv4Address(ip.strip())
    except ValueError:
        return None
    return ".".join(str(address).split(".")[:3])


class EndpointSession:
    """Caches the result of ResolveEndpointUseCase for the lifetime of a session."""

    def __init__(self, resolver: ResolveEndpointUseCase, config: EndpointProbeConfig):
        self._resolver = resolver
        self._config = config
        self._resolved: ResolvedEndpoint | None = None
        self._network_id: str | None = None
        self._lock = asyncio.Lock()

    @property
    def resolved(self) -> ResolvedEndpoint | None:
        return self._resolved

    async def current(self) -> ResolvedEndpoint:
        """Return the session endpoint, resolving it on first use."""
        async with self._lock:
            if self._resolved is None:
                self._resolved = await self._resolver.execute(self._config)
            return self._resolved

    async def refresh(self) -> ResolvedEndpoint:
        """Force a new resolution pass."""
        async with self._lock:
            logger.info("Re-detecting backend endpoint")
            self._resolved = await self._resolver.execute(self._config)
            return self._resolved

    async def on_network_change(self, network_id: str | None) -> ResolvedEndpoint | None:
        """Re-resolve when the device moved to a different network.

        The first observed identifier is only recorded. Unknown identifiers
        (None) are ignored. Returns the new endpoint when a re-resolution
        happened, else None.
        """
        if network_id is None:
            return None

        previous = self._network_id
        self._network_id = network_id
        if previous is None or previous == network_id:
            return None

        logger.info("Network changed: %s → %s", previous, network_id)
        return await self.refresh()
