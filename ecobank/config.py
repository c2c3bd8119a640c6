from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EcobankSettings(BaseSettings):
    """Client configuration read from ``ECOBANK_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="ECOBANK_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    username: str = Field(default="", description="API user id used to request tokens.")
    password: str = Field(default="", description="API password used to request tokens.")
    lab_key: str = Field(default="", description="Shared secret appended to the secure hash input.")
    token: Optional[str] = Field(default=None, description="Pre-issued bearer token.")
    base_url: str = Field(
        default="https://developer.ecobank.com/corporateapi/",
        min_length=8,
        description="Root of the corporate API.",
    )
    user_agent: str = Field(default="ecobank-python/0.1.0", min_length=1)
    timeout_seconds: float = Field(default=30.0, gt=0, description="Timeout per HTTP request.")
    disable_retries: bool = Field(default=False)
    max_attempts: int = Field(default=6, ge=1, le=20, description="Attempts per request, first one included.")
    base_delay_ms: int = Field(default=100, ge=0)
    max_delay_ms: int = Field(default=400, ge=0)
    strict_hash_values: bool = Field(
        default=False,
        description="Reject field types the secure hash cannot render instead of hashing them as empty.",
    )
