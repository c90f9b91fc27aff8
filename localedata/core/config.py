from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, List

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .models import TableKind

ENV_FILE_NAME = ".env"


class Settings(BaseSettings):
    RESOURCE_PACKAGE: str = "localedata.locales"
    PRELOAD_KINDS: Annotated[List[TableKind], NoDecode] = []
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: bool = False
    LOG_DIR: str = "logs"

    @field_validator("PRELOAD_KINDS", mode="before")
    @classmethod
    def parse_preload_kinds(cls, v):  # type: ignore
        if v in (None, "", []):
            return []
        if isinstance(v, str):
            v = [x.strip() for x in v.split(",") if x.strip()]
        if isinstance(v, (list, tuple, set)):
            # "all" is shorthand for every table kind
            if "all" in v:
                return list(TableKind)
            return [TableKind(x) for x in v]
        raise ValueError("PRELOAD_KINDS must be a comma-separated list of table kinds")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v):  # type: ignore
        level = str(v or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="LOCALEDATA_",
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings on first use, after loading .env from the working directory."""
    load_dotenv(ENV_FILE_NAME)
    return Settings()
