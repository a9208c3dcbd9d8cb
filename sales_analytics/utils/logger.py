import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from sales_analytics.utils.constants import LOG_DIR, LOG_LEVEL

LOGGER_NAME = 'sales_analytics'

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(module)-15s | %(funcName)-20s | %(message)s'

class SalesAnalyticsLogger:
    """Shared logger for the package.

    Library code only ever gets the console handler. A dated log file is
    attached on request, which the command-line entry point does; analysis
    runs on their own never touch the filesystem.
    """

    def __init__(self, console_level: str = LOG_LEVEL):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers = []
        self.log_file: Optional[Path] = None

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, console_level, logging.INFO))
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
        self.logger.addHandler(console_handler)

    def add_file_handler(self, log_dir: Union[str, Path] = LOG_DIR, level: str = "DEBUG") -> Path:
        """Also write to ``<log_dir>/sales_analytics_YYYYMMDD.log``; idempotent"""
        if self.log_file is not None:
            return self.log_file

        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"sales_analytics_{datetime.now().strftime('%Y%m%d')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(getattr(logging, level, logging.DEBUG))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        self.logger.addHandler(file_handler)

        self.log_file = log_file
        self.logger.debug(f"File logging enabled: {log_file}")
        return log_file

    def get_logger(self) -> logging.Logger:
        return self.logger

# Global logger instance
_logger_instance = None

def _instance() -> SalesAnalyticsLogger:
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = SalesAnalyticsLogger()
    return _logger_instance

def get_logger() -> logging.Logger:
    """Get or create logger instance"""
    return _instance().get_logger()

def enable_file_logging(log_dir: Union[str, Path] = LOG_DIR) -> Path:
    """Attach the dated log file handler to the shared logger"""
    return _instance().add_file_handler(log_dir)
