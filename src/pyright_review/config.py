# src/pyright_review/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PYRIGHT_REVIEW_", env_file=".env", extra="ignore")

    # Diff
    default_commit: str = "main"

    # Repository config
    repo_config_file: str = ".pyright-review.yaml"

    # Logging
    log_level: str = "INFO"
