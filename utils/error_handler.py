"""
Fehler-Taxonomie und Error Handler für die Skalen-Berechnung
"""
from enum import Enum
from typing import Any, Optional, Dict

from utils.logger import get_logger

logger = get_logger()


class ErrorType(Enum):
    """Kategorisierung von Fehlern"""
    CONFIGURATION = "configuration"
    DEGENERATE_RANGE = "degenerate_range"
    INVALID_VALUE = "invalid_value"
    MISSING_STEP = "missing_step"
    UNKNOWN = "unknown"


class FluidTypeError(Exception):
    """Basis-Exception für Fluid Type Fehler"""
    def __init__(self, message: str, error_type: ErrorType = ErrorType.UNKNOWN, context: dict = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class ConfigurationError(FluidTypeError):
    """Ungültige oder degenerierte Konfiguration"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        error_type: ErrorType = ErrorType.CONFIGURATION,
    ):
        context = {"field": field, "value": value} if field else {}
        super().__init__(message, error_type, context)
        self.field = field
        self.value = value


class DegenerateViewportError(ConfigurationError):
    """min_width == max_width: the interpolation slope is undefined"""
    def __init__(self, width: float):
        super().__init__(
            f"Degenerate viewport range: min_width and max_width are both {width}",
            field="max_width",
            value=width,
            error_type=ErrorType.DEGENERATE_RANGE,
        )


class ErrorHandler:
    """Error Handler mit Fallback-Rückgabewerten"""

    def __init__(self):
        self.logger = logger

    def _classify_error(self, error: Exception) -> ErrorType:
        """Klassifiziert Error nach Typ"""
        if isinstance(error, FluidTypeError):
            return error.error_type
        if isinstance(error, (ValueError, TypeError, ZeroDivisionError, OverflowError)):
            return ErrorType.INVALID_VALUE
        if isinstance(error, (KeyError, LookupError)):
            return ErrorType.MISSING_STEP
        return ErrorType.UNKNOWN

    def log_error(self, error: Exception, context: Optional[Dict] = None):
        """Detailliertes Error Logging"""
        error_type = self._classify_error(error)

        if isinstance(error, ConfigurationError):
            # Expected while the user is still editing values
            self.logger.log_configuration_error(error)
            if context:
                self.logger.debug(f"Error Context: {context}")
        else:
            self.logger.log_error_with_context(error, context or {}, error_type.value)


# Globale Error Handler Instanz
error_handler = ErrorHandler()
