"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ApiConfig(BaseSettings):
    """HTTP façade configuration."""

    model_config = {"env_prefix": "USAGEPARSER_API_"}

    title: str = "Usage Parser Service"
    version: str = "0.1.0"
    max_bulk_lines: int = 10_000


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "USAGEPARSER_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_failed_lines: bool = True  # WARNING when True, DEBUG otherwise

    api: ApiConfig = ApiConfig()
