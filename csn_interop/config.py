"""
Package configuration using Pydantic Settings.

Supports environment variables (prefix ``CSN_INTEROP_``) and .env files.
"""

from functools import lru_cache
import json
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """Transformer settings loaded from environment variables."""

    # i18n bundle discovery
    project_root: Path = Path(".")
    i18n_folders: Annotated[list[str], NoDecode] = ["_i18n", "i18n", "assets/i18n"]
    i18n_basename: str = "i18n"

    # Interop output
    normalize_locale_separator: bool = True
    remove_localized_associations: bool = True

    @field_validator("i18n_folders", mode="before")
    @classmethod
    def parse_i18n_folders(cls, v):
        if isinstance(v, str):
            value = v.strip()
            if value.startswith("["):
                try:
                    parsed = json.loads(value)
                    if isinstance(parsed, list):
                        return [str(folder).strip() for folder in parsed if str(folder).strip()]
                except json.JSONDecodeError:
                    pass
            return [folder.strip() for folder in v.split(",") if folder.strip()]
        return v

    @field_validator("project_root", mode="before")
    @classmethod
    def parse_project_root(cls, v):
        if isinstance(v, str):
            return Path(v)
        return v

    model_config = {
        "env_prefix": "CSN_INTEROP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
