"""Configuration settings for smokereport."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from smokereport.exporters.checklist import DEFAULT_TITLE
from smokereport.exporters.tabular import ERROR_MAX_LENGTH


class Settings(BaseSettings):
    """Settings loaded from SMOKE_* environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="SMOKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # .env also holds BASE_URL, TEST_USER, ... for the smoke suite
    )

    # Paths
    project_root: Path = Path(".")
    artifacts_dir: Path = Path("artifacts")
    results_basename: str = "smoke_results"
    checklist_file: Path = Path("smoke_scenarios.md")

    # Output
    checklist_title: str = DEFAULT_TITLE
    error_max_length: int = ERROR_MAX_LENGTH

    # Shown when no report is found
    smoke_command: str = "npm run test:smoke"

    # Logging
    log_level: str = "WARNING"
    log_json_format: bool = False

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the project root."""
        return path if path.is_absolute() else self.project_root / path

    @property
    def artifacts_path(self) -> Path:
        """Absolute-or-root-relative artifacts directory."""
        return self.resolve(self.artifacts_dir)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
