from pydantic import field_validator
from pydantic_settings import BaseSettings
from datetime import timedelta
from pathlib import Path
from typing import List
import re

BASE_DIR = Path(__file__).resolve().parent.parent

_SECOND = 1
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR

# Unit names follow the "ms" notation used by jsonwebtoken's expiresIn
_DURATION_UNITS = {
    "ms": 0.001, "msec": 0.001, "msecs": 0.001, "millisecond": 0.001, "milliseconds": 0.001,
    "s": _SECOND, "sec": _SECOND, "secs": _SECOND, "second": _SECOND, "seconds": _SECOND,
    "m": _MINUTE, "min": _MINUTE, "mins": _MINUTE, "minute": _MINUTE, "minutes": _MINUTE,
    "h": _HOUR, "hr": _HOUR, "hrs": _HOUR, "hour": _HOUR, "hours": _HOUR,
    "d": _DAY, "day": _DAY, "days": _DAY,
    "w": 7 * _DAY, "week": 7 * _DAY, "weeks": 7 * _DAY,
    "y": 365.25 * _DAY, "yr": 365.25 * _DAY, "yrs": 365.25 * _DAY, "year": 365.25 * _DAY, "years": 365.25 * _DAY,
}
_DURATION_PATTERN = re.compile(r"^\s*(\d*\.?\d+) *([a-z]*)\s*$", re.IGNORECASE)


def parse_duration(value) -> timedelta:
    """
    Parse an expiry window such as ``3600``, ``"30m"``, ``"1.5h"``, ``"2 days"`` or ``"1y"``.

    Integers are seconds. Strings use the ``ms`` notation: a number with an
    optional unit, where a bare number means milliseconds.

    Raises:
        ValueError: If the value is not a non-negative duration
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Invalid duration: {value!r}")
        return timedelta(seconds=value)

    match = _DURATION_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")

    amount, unit = match.groups()
    factor = _DURATION_UNITS.get((unit or "ms").lower())
    if factor is None:
        raise ValueError(f"Invalid duration: {value!r}")
    return timedelta(seconds=float(amount) * factor)


class Settings(BaseSettings):
    """
    Application settings and configuration management.
    Loads environment variables from .env file.
    """

    # ============ API Configuration ============
    API_TITLE: str = "Bearer Login Demo"
    API_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # ============ Server Configuration ============
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    STATIC_DIR: Path = BASE_DIR / "public"
    """Directory of static assets; login.html inside it is served at /"""

    # ============ JWT Authentication Configuration ============
    JWT_SECRET: str = "change-me-jwt-secret"
    """Secret key for JWT token signing - change in production"""

    JWT_ALGORITHM: str = "HS256"
    """JWT algorithm for token encoding"""

    JWT_EXPIRES_IN: str = "1h"
    """Token lifetime in "ms" notation, e.g. 1h, 30m, 2 days; a bare number is milliseconds"""

    # ============ Password Hashing ============
    BCRYPT_ROUNDS: int = 10
    """bcrypt cost factor"""

    # ============ Demo Account ============
    DEMO_USERNAME: str = "nasyira"
    DEMO_PASSWORD: str = "12345678"
    """Account preloaded at startup; leave DEMO_USERNAME empty to skip"""

    # ============ CORS Configuration ============
    ALLOWED_ORIGINS: List[str] = ["*"]
    """Allowed origins for CORS requests"""

    @field_validator("JWT_EXPIRES_IN", mode="before")
    @classmethod
    def _check_expires_in(cls, value):
        parse_duration(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value}s"
        return str(value)

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def _check_rounds(cls, value: int) -> int:
        if not 4 <= value <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return value

    @property
    def token_expires_delta(self) -> timedelta:
        return parse_duration(self.JWT_EXPIRES_IN)

    class Config:
        env_file = ".env"
        """Load environment variables from .env file"""

        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

# Create global settings instance
settings = Settings()
