"""
Environment-driven settings. Values come from the process environment,
optionally seeded from a .env file in the working directory.
"""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _timeout(raw: str | None) -> float:
    value = float(raw) if raw and raw.strip() else 30.0
    if value <= 0:
        logger.warning(f"Ignoring non-positive KAVENEGAR_TIMEOUT={raw!r}; using 30s")
        return 30.0
    return value


def _optional_int(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    insecure: bool = False
    timeout: float = 30.0
    per_second: int | None = None
    per_minute: int | None = None

    @staticmethod
    def from_env(dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        insecure = (os.getenv("KAVENEGAR_INSECURE") or "").strip().lower() in _TRUTHY
        if insecure:
            logger.warning("KAVENEGAR_INSECURE is set; requests will use plain http")
        return Settings(
            api_key=os.getenv("KAVENEGAR_API_KEY"),
            insecure=insecure,
            timeout=_timeout(os.getenv("KAVENEGAR_TIMEOUT")),
            per_second=_optional_int(os.getenv("KAVENEGAR_PER_SECOND")),
            per_minute=_optional_int(os.getenv("KAVENEGAR_PER_MINUTE")),
        )
