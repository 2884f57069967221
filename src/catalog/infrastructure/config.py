from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    store_backend: Literal["firestore", "json"] = "firestore"
    data_dir: Path = Path("data")
    products_collection: str = "products"

    # Left unset, firebase_admin falls back to GOOGLE_CLOUD_PROJECT or the
    # project of the ambient credentials.
    gcp_project: str | None = None

    log_level: str = "INFO"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("store_backend", "log_level", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()

    @property
    def json_store_path(self) -> Path:
        return self.data_dir / "documents.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
