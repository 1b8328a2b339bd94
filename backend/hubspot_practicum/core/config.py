"""
Application configuration from environment variables.
Settings class using pydantic-settings; every field has a local-dev default.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from backend root so it loads when running from backend/ or project root
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    """
    Application settings loaded from environment and .env.
    An empty PRIVATE_APP_ACCESS is allowed: pages render empty and writes are skipped.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # HubSpot (explicit env names so .env values are always read)
    private_app_access: str = Field(
        default="",
        description="HubSpot Private App access token (Bearer auth)",
        validation_alias="PRIVATE_APP_ACCESS",
    )
    hubspot_base_url: str = Field(
        default="https://api.hubapi.com",
        description="HubSpot API root",
        validation_alias="HUBSPOT_BASE_URL",
    )
    hubspot_object_type: str = Field(
        default="2-55323801",
        description="Custom object type id from the portal URL (objects/<type>/views/...)",
        validation_alias="HUBSPOT_OBJECT_TYPE",
    )
    hubspot_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for a HubSpot response",
        validation_alias="HUBSPOT_TIMEOUT",
    )

    # Server
    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")

    @field_validator("private_app_access", "hubspot_base_url", "hubspot_object_type", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def custom_object_endpoint(self) -> str:
        return f"{self.hubspot_base_url.rstrip('/')}/crm/v3/objects/{self.hubspot_object_type}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
