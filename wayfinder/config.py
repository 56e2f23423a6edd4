"""Application configuration via Pydantic Settings.

NOTE: Every setting is mapped to an explicit env variable name
(GOOGLE_PLACES_API_KEY, ENDPOINT_CANDIDATES, etc.) to avoid silent
misconfiguration. ENDPOINT_CANDIDATES is read as a JSON list.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from wayfinder.domain.value_objects.endpoint import EndpointProbeConfig
from wayfinder.domain.value_objects.enums import SuggestionMode

PLACES_API_KEY_PLACEHOLDER = "YOUR_GOOGLE_PLACES_API_KEY"

# Development hosts, most likely first
DEFAULT_ENDPOINT_CANDIDATES = [
    "192.168.8.142",
    "192.168.137.93",
    "192.168.8.159",
    "172.20.10.2",  # phone hotspot
    "10.21.83.2",
    "192.168.1.100",
    "192.168.0.100",
    "10.0.2.2",  # Android emulator
    "localhost",
    "127.0.0.1",
]


class Settings(BaseSettings):
    # App
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # Google Places
    google_places_api_key: str = Field(
        default=PLACES_API_KEY_PLACEHOLDER,
        validation_alias="GOOGLE_PLACES_API_KEY",
    )
    places_base_url: str = Field(
        default="https://maps.googleapis.com/maps/api/place",
        validation_alias="PLACES_BASE_URL",
    )
    places_types: str = Field(
        default="establishment|geocode|tourist_attraction",
        validation_alias="PLACES_TYPES",
    )
    places_components: str = Field(default="country:lk", validation_alias="PLACES_COMPONENTS")
    places_timeout_s: float = Field(default=10.0, validation_alias="PLACES_TIMEOUT_S")
    suggestion_mode: SuggestionMode | None = Field(default=None, validation_alias="SUGGESTION_MODE")

    # Endpoint detection
    endpoint_candidates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ENDPOINT_CANDIDATES),
        validation_alias="ENDPOINT_CANDIDATES",
    )
    endpoint_fallback: str = Field(default="192.168.137.93", validation_alias="ENDPOINT_FALLBACK")
    endpoint_port: int = Field(default=3001, validation_alias="ENDPOINT_PORT")
    endpoint_probe_path: str = Field(default="health", validation_alias="ENDPOINT_PROBE_PATH")
    endpoint_probe_timeout_ms: int = Field(default=2000, validation_alias="ENDPOINT_PROBE_TIMEOUT_MS")
    endpoint_secure: bool = Field(default=False, validation_alias="ENDPOINT_SECURE")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    @property
    def places_api_key_configured(self) -> bool:
        key = self.google_places_api_key.strip()
        return bool(key) and key != PLACES_API_KEY_PLACEHOLDER

    @property
    def default_suggestion_mode(self) -> SuggestionMode:
        """Explicit SUGGESTION_MODE wins; otherwise remote only with a real key."""
        if self.suggestion_mode is not None:
            return self.suggestion_mode
        return SuggestionMode.REMOTE if self.places_api_key_configured else SuggestionMode.LOCAL

    def endpoint_probe_config(self) -> EndpointProbeConfig:
        return EndpointProbeConfig(
            candidates=tuple(self.endpoint_candidates),
            fallback=self.endpoint_fallback,
            probe_path=self.endpoint_probe_path,
            timeout_ms=self.endpoint_probe_timeout_ms,
            port=self.endpoint_port,
            secure=self.endpoint_secure,
        )


settings = Settings()
