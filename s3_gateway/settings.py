from __future__ import annotations
"""Application settings loaded from the process environment."""

from dataclasses import dataclass
import os
from typing import Mapping

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """Simple container for gateway settings."""

    host: str = "127.0.0.1"
    port: int = 8787
    region_name: str | None = None
    endpoint_url: str | None = None
    max_keys: int = 1000
    log_level: str = "INFO"


def _positive_int(value: str | None, default: int) -> int:
    try:
        parsed = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    if parsed <= 0:
        return default
    return parsed


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """Read settings from ``environ`` (defaults to ``os.environ``).

    Credentials are resolved by boto3's default chain, never here.
    """

    env = os.environ if environ is None else environ
    log_level = (env.get("LOG_LEVEL") or AppSettings.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = AppSettings.log_level
    return AppSettings(
        host=(env.get("HOST") or AppSettings.host).strip(),
        port=_positive_int(env.get("PORT"), AppSettings.port),
        region_name=env.get("AWS_REGION") or None,
        endpoint_url=env.get("S3_ENDPOINT_URL") or None,
        max_keys=_positive_int(env.get("S3_GATEWAY_MAX_KEYS"), AppSettings.max_keys),
        log_level=log_level,
    )
