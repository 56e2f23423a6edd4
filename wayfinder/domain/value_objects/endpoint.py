"""Endpoint value objects — probe configuration, attempts and the resolved endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field

from wayfinder.domain.value_objects.enums import ProbeFailure

DEFAULT_PORT = 3001
DEFAULT_PROBE_PATH = "health"
DEFAULT_PROBE_TIMEOUT_MS = 2000


def build_base_url(host: str, port: int, secure: bool = False) -> str:
    scheme = "https" if secure else "http"
    return f"{scheme}://{host}:{port}"


@dataclass(frozen=True)
class EndpointProbeConfig:
    """Everything one resolution pass needs, passed in at call time.

    Candidates are bare hosts (no scheme, no port) ordered by preference.
    """

    candidates: tuple[str, ...]
    fallback: str
    probe_path: str = DEFAULT_PROBE_PATH
    timeout_ms: int = DEFAULT_PROBE_TIMEOUT_MS
    port: int = DEFAULT_PORT
    secure: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable copy
        object.__setattr__(self, "candidates", tuple(self.candidates))
        if not self.candidates:
            raise ValueError("At least one candidate host is required")
        if any(not host or "://" in host for host in self.candidates):
            raise ValueError(f"Candidates must be bare hosts: {self.candidates!r}")
        if not self.fallback:
            raise ValueError("A fallback host is required")
        if self.timeout_ms <= 0:
            raise ValueError(f"Probe timeout must be positive, got {self.timeout_ms}")

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000.0

    def probe_url(self, host: str) -> str:
        return f"{build_base_url(host, self.port, self.secure)}/{self.probe_path.lstrip('/')}"


@dataclass(frozen=True)
class ProbeAttempt:
    """Outcome of a single liveness probe."""

    host: str
    url: str
    ok: bool
    status_code: int | None = None
    failure: ProbeFailure | None = None
    elapsed_ms: int = 0


@dataclass(frozen=True)
class ResolvedEndpoint:
    host: str
    port: int
    secure: bool
    fallback_used: bool
    attempts: tuple[ProbeAttempt, ...] = field(default_factory=tuple)

    @property
    def base_url(self) -> str:
        return build_base_url(self.host, self.port, self.secure)
