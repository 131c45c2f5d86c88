"""Runtime settings read from the environment (optionally populated from .env)."""

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    phone_region: str = "SG"
    sample_data: bool = True
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from FEEBOOK_* environment variables. Call after load_dotenv."""
    region = os.environ.get("FEEBOOK_PHONE_REGION", "SG").strip().upper() or "SG"
    sample = os.environ.get("FEEBOOK_SAMPLE_DATA", "1").strip().lower() in _TRUTHY
    level = os.environ.get("FEEBOOK_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    return Settings(phone_region=region, sample_data=sample, log_level=level)
