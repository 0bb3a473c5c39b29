"""
Configuración de logging para la herramienta de línea de comando.

Con consola habilitada se loguea a stderr y además a un archivo
console_<timestamp UTC>.log dentro de log_path. Sin consola solo
llegan errores a stderr.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(funcName)s (%(filename)s:%(lineno)d) >> %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def log_file_name(now: Optional[datetime] = None) -> str:
    """Nombre del archivo de log con timestamp UTC, ej: console_2024-01-05T10-30-00Z.log"""
    now = now or datetime.now(timezone.utc)
    return "console_" + now.strftime("%Y-%m-%dT%H-%M-%SZ") + ".log"


def setup_logging(
    log_path: Optional[str] = None,
    output_console: bool = True,
    log_level: str = "DEBUG",
) -> Optional[Path]:
    """
    Configura el root logger y retorna la ruta del archivo de log (o None).

    Args:
        log_path: directorio para el archivo de log; se crea si no existe.
        output_console: si es False no hay archivo y solo ERROR+ va a stderr.
        log_level: nivel (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root_logger = logging.getLogger()
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Se sacan los handlers previos (llamadas repetidas no duplican salida)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if not output_console:
        root_logger.setLevel(logging.ERROR)
        console_handler.setLevel(logging.ERROR)
        return None

    root_logger.setLevel(level)
    console_handler.setLevel(level)

    log_file: Optional[Path] = None
    if log_path:
        log_dir = Path(log_path).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / log_file_name()
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return log_file
