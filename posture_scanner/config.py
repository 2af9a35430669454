# posture_scanner/config.py
import math
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SecurePostureScanner/0.1)"


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    # env-derived defaults go through the validators too
    model_config = ConfigDict(validate_default=True)

    # Probes
    probe_timeout: float = Field(default_factory=lambda: float(os.getenv("PROBE_TIMEOUT", "8.0")))
    # parsed by pydantic: true/false, yes/no, on/off, 1/0; anything else is rejected
    verify_tls: bool = Field(default_factory=lambda: os.getenv("VERIFY_TLS", "true").strip())
    user_agent: str = Field(default_factory=lambda: os.getenv("SCANNER_USER_AGENT", DEFAULT_USER_AGENT))

    # Report
    max_priorities: int = Field(default_factory=lambda: int(os.getenv("MAX_PRIORITIES", "3")))

    # API
    cors_origins: List[str] = Field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
        )
    )
    host: str = Field(default_factory=lambda: os.getenv("SCANNER_HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("SCANNER_PORT", "8000")))

    # Logging
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    @field_validator("probe_timeout")
    @classmethod
    def _finite_timeout(cls, value: float) -> float:
        # an unbounded probe could hang a scan forever
        if not math.isfinite(value) or value <= 0:
            raise ValueError("probe_timeout must be a finite, positive number of seconds")
        return value

    @field_validator("max_priorities")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_priorities must be >= 0")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
