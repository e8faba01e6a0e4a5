from __future__ import annotations
import os
from dataclasses import dataclass


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    fmt: str = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"


def get_logging_config() -> LoggingConfig:
    return LoggingConfig(
        level=os.getenv("UBL2CII_LOG_LEVEL", "INFO").upper(),
        fmt=os.getenv("UBL2CII_LOG_FORMAT", LoggingConfig.fmt),
    )


@dataclass(frozen=True)
class APIConfig:
    api_key: str | None = None
    host: str = "0.0.0.0"
    port: int = 8000


def get_api_config() -> APIConfig:
    return APIConfig(
        api_key=os.getenv("UBL2CII_API_KEY") or None,
        host=os.getenv("UBL2CII_HOST", "0.0.0.0"),
        port=_int_env("UBL2CII_PORT", "8000"),
    )


@dataclass(frozen=True)
class ExportConfig:
    indent: int | None = 2


def get_export_config() -> ExportConfig:
    # UBL2CII_JSON_INDENT=0 writes compact JSON
    indent = _int_env("UBL2CII_JSON_INDENT", "2")
    return ExportConfig(indent=indent if indent > 0 else None)
