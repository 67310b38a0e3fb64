# borr/config.py
from enum import Enum
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central configuration for the borr parser.
    Values are read from BORR_* environment variables or a local .env file.
    """

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Language files ---
    FILE_ENCODING: str = "utf-8"
    LANGUAGE_DIR: str = "data/lang"
    LANGUAGE_FILE_SUFFIXES: List[str] = [".borr", ".lang"]

    # --- Variable expansion ---
    # Upper bound on substitutions performed for a single value.
    MAX_EXPANSION_PASSES: int = Field(default=64, ge=1)

    # --- Library metadata (used by the ${liburl} expander) ---
    LIB_URL: str = "https://github.com/SimonCahill"

    model_config = SettingsConfigDict(env_prefix="BORR_", env_file=".env", extra="ignore")


settings = Settings()
