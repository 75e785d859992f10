"""Configuration settings for the FutCerto service."""

import os
from functools import lru_cache
from typing import Optional, Union

from dotenv import load_dotenv

from futcerto.core.errors import ConfigurationError

load_dotenv()

BOOKING_STATUSES = ("pending", "confirmed")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    PROJECT_NAME: str = "FutCerto"
    REQUIRED = ("DATABASE_URL", "SECRET_KEY", "MAP_ACCESS_TOKEN")

    def __init__(self, **overrides: object) -> None:
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "")
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "")
        self.MAP_ACCESS_TOKEN: str = os.getenv("MAP_ACCESS_TOKEN", "")
        self.ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
        # parsed by validate()
        self.ACCESS_TOKEN_EXPIRE_MINUTES: Union[int, str] = os.getenv(
            "ACCESS_TOKEN_EXPIRE_MINUTES", "60"
        )
        self.APP_ORIGIN: str = os.getenv("APP_ORIGIN", "http://localhost:8080")
        # "pending" or "confirmed"
        self.BOOKING_INITIAL_STATUS: str = os.getenv("BOOKING_INITIAL_STATUS", "pending")
        self.CORS_ORIGINS: list[str] = _split_csv(os.getenv("CORS_ORIGINS", ""))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting {key!r}")
            setattr(self, key, value)

    def validate(self) -> "Settings":
        """Fail fast when the service cannot run with this configuration."""

        missing = [name for name in self.REQUIRED if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                "Missing required configuration: "
                + ", ".join(missing)
                + ". Set them in the environment or in a .env file."
            )

        status_value: Optional[str] = (self.BOOKING_INITIAL_STATUS or "").strip().lower()
        if status_value not in BOOKING_STATUSES:
            raise ConfigurationError(
                f"BOOKING_INITIAL_STATUS must be one of {', '.join(BOOKING_STATUSES)}; "
                f"got {self.BOOKING_INITIAL_STATUS!r}"
            )
        self.BOOKING_INITIAL_STATUS = status_value

        try:
            minutes = int(str(self.ACCESS_TOKEN_EXPIRE_MINUTES).strip())
        except ValueError:
            minutes = 0
        if minutes <= 0:
            raise ConfigurationError(
                "ACCESS_TOKEN_EXPIRE_MINUTES must be a positive whole number of minutes; "
                f"got {self.ACCESS_TOKEN_EXPIRE_MINUTES!r}"
            )
        self.ACCESS_TOKEN_EXPIRE_MINUTES = minutes

        level = (self.LOG_LEVEL or "").strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}; got {self.LOG_LEVEL!r}"
            )
        self.LOG_LEVEL = level
        self.APP_ORIGIN = self.APP_ORIGIN.rstrip("/")
        return self


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings", "BOOKING_STATUSES", "LOG_LEVELS"]
