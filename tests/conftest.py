"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from wayfinder.application.ports.liveness_probe import LivenessProbePort
from wayfinder.application.ports.suggestion_provider import SuggestionProvider
from wayfinder.domain.value_objects.endpoint import EndpointProbeConfig, ProbeAttempt
from wayfinder.domain.value_objects.enums import ProbeFailure
from wayfinder.domain.value_objects.suggestion_result import SuggestionResult


class FakeProbe(LivenessProbePort):
    """Answers 200 for reachable hosts, a timeout for everything else."""

    def __init__(self, reachable: set[str] | None = None):
        self.reachable = reachable or set()
        self.calls: list[tuple[str, str, float]] = []

    async def probe(self, host, url, timeout_s):
        self.calls.append((host, url, timeout_s))
        if host in self.reachable:
            return ProbeAttempt(host=host, url=url, ok=True, status_code=200)
        return ProbeAttempt(host=host, url=url, ok=False, failure=ProbeFailure.TIMEOUT)


class CountingProvider(SuggestionProvider):
    """Records every query it receives and returns a fixed result."""

    def __init__(self, result: SuggestionResult | None = None):
        self.result = result if result is not None else SuggestionResult.empty()
        self.queries: list[str] = []

    async def suggest(self, query):
        self.queries.append(query)
        return self.result


@pytest.fixture
def probe_config():
    return EndpointProbeConfig(
        candidates=("192.168.8.142", "10.0.2.2", "localhost"),
        fallback="192.168.137.93",
        probe_path="health",
        timeout_ms=2000,
        port=3001,
    )


@pytest.fixture
def make_probe():
    return FakeProbe


@pytest.fixture
def make_provider():
    return CountingProvider
