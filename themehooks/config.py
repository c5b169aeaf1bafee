from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Theme Hooks"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False

    # Extensions installed at startup, in hook execution order
    enabled_extensions: list[str] = ["class_hooks", "legacy_hooks"]

    # Theme settings
    templates_dir: Path = PACKAGE_DIR / "templates"
    static_dir: Path = PACKAGE_DIR / "static"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
