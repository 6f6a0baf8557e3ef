"""Runtime settings, read from ``FUTURO_*`` environment variables."""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "FUTURO_"


class Settings(BaseModel):
    history_path: str = os.path.join("data", "historico.json")
    history_limit: int = Field(10, ge=1)
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}
        if f"{ENV_PREFIX}HISTORY_PATH" in environ:
            values["history_path"] = environ[f"{ENV_PREFIX}HISTORY_PATH"]
        if f"{ENV_PREFIX}HISTORY_LIMIT" in environ:
            values["history_limit"] = environ[f"{ENV_PREFIX}HISTORY_LIMIT"]
        if f"{ENV_PREFIX}CORS_ORIGINS" in environ:
            values["cors_origins"] = [
                origin.strip() for origin in environ[f"{ENV_PREFIX}CORS_ORIGINS"].split(",") if origin.strip()
            ]
        if f"{ENV_PREFIX}LOG_LEVEL" in environ:
            values["log_level"] = environ[f"{ENV_PREFIX}LOG_LEVEL"].upper()
        return cls(**values)
