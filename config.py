import logging
from typing import List

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv(".env")
logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = ("EMAIL_USER", "EMAIL_PASS", "EMAIL_TO")


class ConfigurationError(RuntimeError):
    """Raised when the relay cannot start because configuration is missing."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(
            "Missing environment variable: " + ", ".join(missing)
        )


class Settings(BaseSettings):
    """Settings of the contact relay, read once at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------
    # Mail account - Required
    # ------------------------------
    EMAIL_USER: str
    EMAIL_PASS: str
    EMAIL_TO: str

    # ------------------------------
    # SMTP server - Optional with defaults
    # ------------------------------
    SMTP_SERVER: str = Field(default="smtp.gmail.com")
    SMTP_PORT: int = Field(default=587)

    # ------------------------------
    # Environment
    # ------------------------------
    ENVIRONMENT: str = Field(default="development")
    ALLOWED_ORIGINS: str = Field(default="*")

    @field_validator("EMAIL_USER", "EMAIL_PASS", "EMAIL_TO")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be blank")
        return value

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


def load_settings(**overrides) -> Settings:
    """Build the settings, failing fast when a required value is absent.

    Keyword overrides take precedence over the environment, which is how the
    tests pin a configuration without touching ``os.environ``.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = sorted(
            {
                str(err["loc"][0])
                for err in e.errors()
                if err["loc"] and str(err["loc"][0]) in REQUIRED_SETTINGS
            }
        )
        if not missing:
            raise
        logger.critical(f"🔥 Missing configuration: {', '.join(missing)}")
        raise ConfigurationError(missing) from e
