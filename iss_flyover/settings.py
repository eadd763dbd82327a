import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Endpoints and HTTP timeout used to wire the lookup clients."""

    ipify_url: str = "https://api.ipify.org"
    ipwhois_url: str = "https://ipwho.is"
    iss_flyover_url: str = "https://iss-flyover.herokuapp.com/json/"
    timeout_seconds: float = Field(default=5.0, gt=0)


def get_settings() -> Settings:
    """Build settings from environment variables, falling back to the defaults."""
    overrides = {
        "ipify_url": os.getenv("IPIFY_URL"),
        "ipwhois_url": os.getenv("IPWHOIS_URL"),
        "iss_flyover_url": os.getenv("ISS_FLYOVER_URL"),
        "timeout_seconds": os.getenv("HTTP_TIMEOUT_SECONDS"),
    }
    return Settings(**{key: value for key, value in overrides.items() if value})
