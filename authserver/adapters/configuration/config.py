# authserver/adapters/configuration/config.py

from typing import List, Union
from logging import getLevelName
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False

    # Client directory
    DATABASE_URL: str = "sqlite:///./registered_clients.db"

    # Client authentication
    CLIENT_SECRET_ENCODING: str = "plain"  # "plain" or "hashed"
    SECRET_HASH_SCHEMES: Union[List[str], str] = ["pbkdf2_sha256", "bcrypt"]
    AUTH_REALM: str = "oauth2"

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensures the value is a valid logging level"""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    @field_validator("CLIENT_SECRET_ENCODING", mode="before")
    def validate_secret_encoding(cls, v: str) -> str:
        encoding = v.lower()
        if encoding not in ("plain", "hashed"):
            raise ValueError(f"Invalid CLIENT_SECRET_ENCODING: {v!r}")
        return encoding

    @field_validator("SECRET_HASH_SCHEMES", mode="before")
    def assemble_hash_schemes(cls, v: Union[str, List[str]]) -> List[str]:
        """
        If it comes as a CSV string (e.g. 'a,b,c'), turns it into a list.
        If it already comes as a list, returns it as is.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [scheme.strip() for scheme in v.split(",") if scheme.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"Invalid SECRET_HASH_SCHEMES: {v!r}")

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
