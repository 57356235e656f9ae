import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


class ConfigMissingError(Exception):
    """Raised when a required setting is absent or unusable."""


def resolve_service_url(name: str) -> str:
    # FORTUNE_SERVICE_URL, else the container-network address http://fortune:8000
    url = os.getenv(f"{name.upper()}_SERVICE_URL", f"http://{name}:8000")
    return url.rstrip("/")


@dataclass(frozen=True)
class Settings:
    greeting: str
    fortune_service_url: str
    fortune_timeout: float = 2.0
    log_level: str = "INFO"


def load_settings() -> Settings:
    greeting = os.getenv("GREETING")
    if greeting is None or not greeting.strip():
        raise ConfigMissingError("GREETING must be set")

    raw_timeout = os.getenv("FORTUNE_TIMEOUT", "2.0")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigMissingError(f"FORTUNE_TIMEOUT is not a number: {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigMissingError(f"FORTUNE_TIMEOUT must be positive, got {timeout}")

    return Settings(
        greeting=greeting,
        fortune_service_url=resolve_service_url("fortune"),
        fortune_timeout=timeout,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
