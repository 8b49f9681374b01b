from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

LOGGER_NAME = "navconsole"
LOG_FORMAT = "ts=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"

_CONFIGURED = False
_HANDLER: Optional[logging.Handler] = None


def _file_handler(log_path: Path) -> logging.Handler:
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def configure_logging(
    base_dir: Optional[Path] = None,
    *,
    logger_name: str = LOGGER_NAME,
    level: int = logging.INFO,
) -> Dict[str, str]:
    """Attach a kv file handler under ``<base_dir>/logs``.

    The application logger is configured once per process; any other
    ``logger_name`` (tests) gets its own handler the first time.
    """
    global _CONFIGURED, _HANDLER
    root = base_dir or Path("data/roaming")
    log_dir = root / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "navconsole.log"

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False

    if logger_name == LOGGER_NAME:
        if not _CONFIGURED:
            _HANDLER = _file_handler(log_path)
            logger.addHandler(_HANDLER)
            _CONFIGURED = True
    elif not logger.handlers:
        logger.addHandler(_file_handler(log_path))

    return {
        "log_path": str(log_path),
        "format": "kv",
        "handlers": "file",
        "logger_name": logger_name,
    }


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
