"""
Centralized configuration management using Pydantic Settings.

Configuration is loaded from environment variables with sensible defaults.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BusinessConfig(BaseSettings):
    """Identity of the primary business published in the manifest."""

    model_config = SettingsConfigDict(env_prefix="AUTOGROUP_BUSINESS_")

    name: str = Field(default="AutoGroup North", description="Business name")
    version: str = Field(default="2026-01-19", description="Business version")
    spec_base_url: str = Field(
        default="https://autogroup-north.com",
        description="Base URL for capability spec and schema documents",
    )


class ApiConfig(BaseSettings):
    """Transport adapter configuration."""

    model_config = SettingsConfigDict(env_prefix="AUTOGROUP_API_")

    rest_enabled: bool = Field(default=True, description="Mount the REST adapter")
    rpc_enabled: bool = Field(default=True, description="Mount the JSON-RPC adapter")
    prefix: str = Field(default="", description="Path prefix for all routes")

    @field_validator("prefix")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="AUTOGROUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # General
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # Startup behavior
    load_demo_manifest: bool = Field(
        default=True, description="Register the demo business manifest on startup"
    )
    seal_on_startup: bool = Field(
        default=True, description="Seal the capability registry once startup completes"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    # Nested configs
    business: BusinessConfig = Field(default_factory=BusinessConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)


# Singleton settings instance
settings = Settings()
