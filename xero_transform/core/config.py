from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator

DEFAULT_LOG_PATH = "~/logs/xero-bank-transform"
DEFAULT_LOG_LEVEL = "DEBUG"

ENV_LOG_PATH = "XERO_TRANSFORM_LOG_PATH"
ENV_OUTPUT_CONSOLE = "XERO_TRANSFORM_OUTPUT_CONSOLE"
ENV_LOG_LEVEL = "XERO_TRANSFORM_LOG_LEVEL"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

class TransformSettings(BaseModel):
    input_path: str
    output_path: str
    log_path: str = DEFAULT_LOG_PATH
    output_console: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    sheet: Optional[str] = None

    @field_validator("log_path")
    @classmethod
    def _expand_home(cls, v: str) -> str:
        # "~" -> home del usuario
        return str(Path(v).expanduser())

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default

def env_defaults() -> dict:
    """
    Defaults tomados del entorno (o del .env cargado en main).
    Los argumentos de línea de comando los pisan.
    """
    return {
        "log_path": os.getenv(ENV_LOG_PATH, DEFAULT_LOG_PATH),
        "output_console": _env_bool(ENV_OUTPUT_CONSOLE, True),
        "log_level": os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
    }
