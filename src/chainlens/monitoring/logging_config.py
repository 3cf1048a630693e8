# File: src/chainlens/monitoring/logging_config.py

import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional, Union

from ..utils.logger import LOG_FORMAT, attach_handlers, resolve_level, ROOT_LOGGER_NAME


class LogConfig:
    def __init__(
        self,
        log_dir: str = "logs",
        level: Union[int, str] = logging.INFO,
        to_file: bool = True,
        max_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        self.log_dir = log_dir
        self.level = resolve_level(level)
        self.to_file = to_file
        self.max_size = max_size
        self.backup_count = backup_count

    @classmethod
    def from_settings(cls, settings) -> "LogConfig":
        return cls(
            log_dir=settings.get("logging.log_dir", "logs"),
            level=settings.get("logging.log_level", "INFO"),
            to_file=settings.get("logging.to_file", True),
        )

    def log_file(self) -> str:
        return os.path.join(
            self.log_dir,
            f'chainlens_{datetime.now().strftime("%Y%m%d")}.log'
        )

    def setup_logging(self) -> Optional[str]:
        """Install console and rotating file handlers; returns the log file path if any."""
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        ))
        console_handler.setLevel(self.level)

        file_handler = None
        log_file = None
        if self.to_file:
            os.makedirs(self.log_dir, exist_ok=True)
            log_file = self.log_file()
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=self.max_size,
                backupCount=self.backup_count
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            file_handler.setLevel(logging.DEBUG)

        attach_handlers(console_handler, file_handler)
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(logging.DEBUG if self.to_file else self.level)
        root.propagate = False
        return log_file
