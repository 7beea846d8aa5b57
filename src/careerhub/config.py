"""Configuration loading via Pydantic settings."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class StorageConfig(BaseModel):
    db_path: str = "careerhub.db"
    slot_key: str = "careerhub_internal_jobs"


class LLMConfig(BaseModel):
    provider: str = "google"
    model: str = "gemini-3-flash-preview"
    temperature: float = 0.3
    enabled: bool = True
    base_url: str | None = None


class PolishConfig(BaseModel):
    language: str = "th"


class ExportConfig(BaseModel):
    output_dir: str = "."


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class LoggingConfig(BaseModel):
    level: str = "WARNING"


class CareerHubConfig(BaseModel):
    storage: StorageConfig = StorageConfig()
    llm: LLMConfig = LLMConfig()
    polish: PolishConfig = PolishConfig()
    export: ExportConfig = ExportConfig()
    web: WebConfig = WebConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(config_path: Path | None = None) -> CareerHubConfig:
    """Load configuration from YAML file."""
    if config_path is None:
        config_path = Path("config.yaml")

    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return CareerHubConfig(**data)

    return CareerHubConfig()
