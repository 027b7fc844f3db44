"""Runtime settings.

Values come from environment variables, optionally seeded from a
``.env`` file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[2] / "data"

PRODUCTION = "production"


@dataclass(frozen=True)
class Settings:
    database_url: str = f"sqlite:///{_DATA_DIR / 'storefront.db'}"
    environment: str = "development"
    default_locale: str = "vi"
    order_number_prefix: str = "RP"
    order_number_attempts: int = 3
    db_timeout: float = 5.0
    default_country: str | None = "Vietnam"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    @staticmethod
    def from_env() -> Settings:
        load_dotenv()
        defaults = Settings()
        return Settings(
            database_url=os.getenv("STOREFRONT_DATABASE_URL", defaults.database_url),
            environment=os.getenv("STOREFRONT_ENV", defaults.environment).lower(),
            default_locale=os.getenv("STOREFRONT_LOCALE", defaults.default_locale),
            order_number_prefix=os.getenv(
                "STOREFRONT_ORDER_PREFIX", defaults.order_number_prefix
            ),
            order_number_attempts=_int_env(
                "STOREFRONT_ORDER_NUMBER_ATTEMPTS", defaults.order_number_attempts
            ),
            db_timeout=_float_env("STOREFRONT_DB_TIMEOUT", defaults.db_timeout),
            default_country=os.getenv("STOREFRONT_DEFAULT_COUNTRY", defaults.default_country)
            or None,
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", defaults.log_level).upper(),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
