from pathlib import Path

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# -------------------------------------------------
# Explicitly load .env (CRITICAL)
# -------------------------------------------------

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_PATH)


class Settings(BaseSettings):
    DATABASE_URL: str
    ENVIRONMENT: str = "development"
    PORT: int = Field(..., ge=1, le=65535)
    DATABASE_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    RELOAD: bool = False

    # Sales service sync (env: SALES_SERVICE_URL, SALES_SYNC_TIMEOUT_SECONDS)
    SALES_SERVICE_URL: AnyHttpUrl
    SALES_SYNC_TIMEOUT_SECONDS: float = Field(default=5.0, gt=0, description="Timeout for the outbound sync call")

    class Config:
        extra = "ignore"
        env_file = str(ENV_PATH)
        env_file_encoding = "utf-8"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def sales_service_base_url(self) -> str:
        """SALES_SERVICE_URL without the trailing slash pydantic adds to bare hosts."""
        return str(self.SALES_SERVICE_URL).rstrip("/")


settings = Settings()
