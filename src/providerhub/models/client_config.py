from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, PositiveFloat, field_validator

ENV_BASE_URL = "PROVIDERHUB_BASE_URL"
ENV_TIMEOUT_SECONDS = "PROVIDERHUB_TIMEOUT_SECONDS"
ENV_API_VERSION = "PROVIDERHUB_API_VERSION"


class ClientSettings(BaseModel):
    """Settings handed to the transport that carries records to the service."""

    base_url: str
    timeout_seconds: PositiveFloat = 30.0
    headers: Dict[str, str] = Field(default_factory=dict)

    # Appended as the ``api-version`` query parameter when set.
    api_version: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientSettings":
        env = os.environ if environ is None else environ

        data: Dict[str, object] = {"base_url": env.get(ENV_BASE_URL, "")}
        if env.get(ENV_TIMEOUT_SECONDS):
            data["timeout_seconds"] = env[ENV_TIMEOUT_SECONDS]
        if env.get(ENV_API_VERSION):
            data["api_version"] = env[ENV_API_VERSION]
        return cls.model_validate(data)
