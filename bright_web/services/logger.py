from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

LOGGER_PREFIX = "bright_web.log"
LOG_FORMAT = "%(asctime)s [%(log_type)s] %(message)s"


def _write_to_file(record: logging.LogRecord, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    try:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.handle(record)
    finally:
        handler.close()


class Logger:
    """
    Writes one line per event to a named log ("pageNotFoundLog", "errorLog",
    "exceptionLog", "emailLog", ...).

    Each name maps to the stdlib logger ``bright_web.log.<name>``. When a
    log directory is configured the line also lands in ``<log_dir>/<name>.log``.
    The file is opened for that one line only; no handler is left on the
    shared logger, so two Loggers with different directories never mix lines.
    """

    def __init__(self, is_mode_logging: bool = True, log_dir: Optional[Path] = None):
        self.is_mode_logging = is_mode_logging
        self.log_dir = Path(log_dir) if log_dir else None

    def get_logger(self, file_name: str) -> logging.Logger:
        logger = logging.getLogger(f"{LOGGER_PREFIX}.{file_name}")
        logger.setLevel(logging.INFO)
        return logger

    def write_log_to_file(self, message: str, log_type: str, file_name: str) -> bool:
        if not self.is_mode_logging:
            return False

        logger = self.get_logger(file_name)
        record = logger.makeRecord(logger.name, logging.INFO, __file__, 0, message, None, None, extra={"log_type": log_type})
        try:
            if self.log_dir is not None:
                _write_to_file(record, self.log_dir / f"{file_name}.log")
        except OSError:
            logging.getLogger(__name__).exception("Could not write to log %s", file_name)
            return False

        logger.handle(record)
        return True

    @staticmethod
    def build_message(data: Mapping[str, object]) -> str:
        return ", ".join(f"{k} => {v}" for k, v in data.items())
