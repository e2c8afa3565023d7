from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str | None = None
    log_format: str = "text"  # "text" or "json"

    # Icon sources
    icons_dir: Path = Path("icons")
    icon_extension: str = ".svg"
    output_path: Path = Path("reference/icon-catalog.json")

    # Optional YAML overrides for the built-in tables
    rules_file: Path | None = None
    synonyms_file: Path | None = None


settings = Settings()
