import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    allow_trailing: bool = False  # ignore tokens after a complete expression


def _split(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]

def load_settings(env=None) -> Settings:
    env = os.environ if env is None else env
    values = {}
    if "EXPRTREE_HOST" in env: values["host"] = env["EXPRTREE_HOST"]
    if "PORT" in env: values["port"] = env["PORT"]
    if "EXPRTREE_CORS_ORIGINS" in env: values["cors_origins"] = _split(env["EXPRTREE_CORS_ORIGINS"])
    if "EXPRTREE_LOG_LEVEL" in env: values["log_level"] = env["EXPRTREE_LOG_LEVEL"].upper()
    if "EXPRTREE_ALLOW_TRAILING" in env: values["allow_trailing"] = env["EXPRTREE_ALLOW_TRAILING"]
    return Settings(**values)

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
