"""
Logging-System mit File Rotation und farbiger Konsolen-Ausgabe
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog

from config import LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT, LOG_LEVEL


class AppLogger:
    """Singleton Logger für die gesamte Anwendung"""

    _instance: Optional['AppLogger'] = None
    _logger: Optional[logging.Logger] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._logger is not None:
            return

        self._logger = logging.getLogger('FluidType')
        self._logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

        # Verhindere doppelte Handler
        if self._logger.handlers:
            return

        self._setup_file_handler()
        self._setup_console_handler()

    def _setup_file_handler(self):
        """Erstelle rotating file handler für detaillierte Logs"""
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - '
            '%(filename)s:%(lineno)d - %(funcName)s() - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        self._logger.addHandler(file_handler)

    def _setup_console_handler(self):
        """Erstelle farbigen console handler"""
        # stderr keeps stdout free for generated CSS
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)

        console_formatter = colorlog.ColoredFormatter(
            '%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(message)s',
            datefmt='%H:%M:%S',
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        )

        console_handler.setFormatter(console_formatter)
        self._logger.addHandler(console_handler)

    def get_logger(self) -> logging.Logger:
        """Gibt den konfigurierten Logger zurück"""
        return self._logger

    def debug(self, message: str, **kwargs):
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._logger.warning(message, **kwargs)

    def error(self, message: str, exc_info=False, **kwargs):
        self._logger.error(message, exc_info=exc_info, **kwargs)

    def log_scale_computation(self, mode: str, step_count: int):
        """Logging für jede Neuberechnung der Skala"""
        self.debug(f"Computed {step_count} steps in {mode} mode")

    def log_configuration_error(self, error: Exception):
        """Logging für ungültige Konfigurationen"""
        self.warning(f"Invalid configuration: {error}")

    def log_export(self, prefix: str, step_count: int):
        """Logging für CSS Export"""
        self.info(f"Exported {step_count} custom properties with prefix '--{prefix}-'")

    def log_error_with_context(self, error: Exception, context: dict, error_type: str = "unknown"):
        """Detailliertes Error Logging mit Kontext"""
        self.error(f"Error Type: {error_type} | {str(error)}", exc_info=True)
        if context:
            self.debug(f"Error Context: {context}")


# Singleton Instance
logger = AppLogger()


def get_logger() -> AppLogger:
    """Helper function to get logger instance"""
    return logger
