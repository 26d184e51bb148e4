from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# -----------------------
# Settings and constants
# -----------------------

DEFAULT_API_ENDPOINT = "https://pubsub.googleapis.com"


class PubSubSettings(BaseSettings):

    # PUBSUB_EMULATOR_HOST redirects all traffic to a local emulator, e.g. "localhost:8085"
    emulator_host: Optional[str] = None
    api_endpoint: str = DEFAULT_API_ENDPOINT

    # Applied to every request by HttpClient; cancellation is left to httpx
    timeout_s: float = 60.0

    model_config = SettingsConfigDict(env_prefix="PUBSUB_", extra="ignore")

    @property
    def base_url(self) -> str:
        if self.emulator_host:
            return f"http://{self.emulator_host}"
        return self.api_endpoint.rstrip("/")
