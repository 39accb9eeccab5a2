from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPORARY_FOLDER = Path.home() / ".searchlight" / "temp"


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "Searchlight"
    log_level: str = "INFO"
    # The host only speaks MCP over stdio
    transport: Literal["stdio"] = "stdio"


class SearchEngineSettings(BaseModel):
    """Search engine behaviour, swapped as a whole on every settings update."""

    # 0 disables fuzzy matching; higher values admit looser matches
    threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    automatic_rescan_enabled: bool = True
    # Zero or negative disables the timer regardless of the flag above
    automatic_rescan_interval_in_seconds: int = 300
    rescan_timeout_in_seconds: Optional[float] = Field(default=None, gt=0)
    plugin_enabled: Dict[str, bool] = Field(default_factory=dict)


class PluginsConfig(BaseModel):
    """Plugin loading configuration values."""

    # Import paths, e.g. "my_package.apps:ApplicationSearchPlugin"
    paths: List[str] = Field(default_factory=list)
    temporary_folder: Path = DEFAULT_TEMPORARY_FOLDER


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCHLIGHT_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    search_engine: SearchEngineSettings = SearchEngineSettings()
    plugins: PluginsConfig = PluginsConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]
