from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_MAX_LENGTH = 20
DEFAULT_FIELD_WIDTH = 20
DEFAULT_MAX_LINE_LENGTH = 64 * 1024


@dataclass
class AppConfig:
    log_level: str
    max_length: int
    field_width: int
    max_line_length: int
    encoding: str


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


def load_config() -> AppConfig:
    return AppConfig(
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        max_length=_int_env("NAMELIST_MAX_LENGTH", DEFAULT_MAX_LENGTH),
        field_width=_int_env("NAMELIST_FIELD_WIDTH", DEFAULT_FIELD_WIDTH),
        max_line_length=_int_env("NAMELIST_MAX_LINE_LENGTH", DEFAULT_MAX_LINE_LENGTH),
        encoding=os.getenv("NAMELIST_ENCODING", "utf-8"),
    )
