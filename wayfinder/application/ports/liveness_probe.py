"""Port interface for probing a candidate host for liveness."""

from abc import ABC, abstractmethod

from wayfinder.domain.value_objects.endpoint import ProbeAttempt


class LivenessProbePort(ABC):
    @abstractmethod
    async def probe(self, host: str, url: str, timeout_s: float) -> ProbeAttempt:
        """Issue one bounded liveness request to ``url``.

        Must never raise for network problems: timeouts, refused connections
        and non-2xx answers are reported as a failed ProbeAttempt.
        """
        ...
