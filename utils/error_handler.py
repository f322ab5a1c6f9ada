"""
Fehlerklassen und zentraler Error Handler für Font-Anfragen
"""
import traceback
from enum import Enum
from typing import Callable, Any, Optional, Dict

from utils.logger import get_logger

logger = get_logger()


class ErrorType(Enum):
    """Kategorisierung von Fehlern"""
    VALIDATION = "validation"
    RESOLUTION = "resolution"
    CONTRACT_VIOLATION = "contract_violation"
    NETWORK = "network"
    FILE_IO = "file_io"
    UNKNOWN = "unknown"


class FontError(Exception):
    """Basis-Exception für Font-Fehler"""
    def __init__(self, message: str, error_type: ErrorType = ErrorType.UNKNOWN, context: dict = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class FamilyNameValidationError(FontError):
    """Family Name ist nicht in der Liste bekannter Namen"""
    def __init__(self, family_name: Optional[str], context: dict = None):
        super().__init__(
            f"Invalid family name: {family_name!r}",
            ErrorType.VALIDATION,
            context,
        )
        self.family_name = family_name


class MalformedQueryError(FontError):
    """Query-String entspricht nicht der Grammatik des Providers"""
    def __init__(self, message: str, context: dict = None):
        super().__init__(message, ErrorType.VALIDATION, context)


class FontResolutionError(FontError):
    """Provider hat die Anfrage mit einem Reason-Code abgelehnt"""
    def __init__(self, reason: int, context: dict = None):
        super().__init__(
            f"Font request failed with reason {reason}",
            ErrorType.RESOLUTION,
            context,
        )
        self.reason = reason


class FontRequestInFlightError(FontError):
    """submit() wurde aufgerufen, während bereits eine Anfrage läuft"""
    def __init__(self, message: str = "A font request is already in flight", context: dict = None):
        super().__init__(message, ErrorType.CONTRACT_VIOLATION, context)


class FamilyNamesLoadError(FontError):
    """Ressourcendatei mit Family Names fehlt oder ist defekt"""
    def __init__(self, message: str, context: dict = None):
        super().__init__(message, ErrorType.FILE_IO, context)


class ErrorHandler:
    """Klassifiziert und loggt Fehler"""

    def __init__(self):
        self.logger = logger

    def _classify_error(self, error: Exception) -> ErrorType:
        """Klassifiziert Error nach Typ"""
        if isinstance(error, FontError):
            return error.error_type

        error_str = str(error).lower()
        error_type_str = type(error).__name__.lower()

        if any(keyword in error_type_str for keyword in ['connection', 'timeout', 'ssl']):
            return ErrorType.NETWORK

        if any(keyword in error_str for keyword in ['connection', 'network', 'download', 'timed out']):
            return ErrorType.NETWORK

        if any(keyword in error_type_str for keyword in ['ioerror', 'filenotfound', 'permission', 'jsondecode']):
            return ErrorType.FILE_IO

        return ErrorType.UNKNOWN

    def log_error(self, error: Exception, context: Optional[Dict] = None):
        """Detailliertes Error Logging"""
        error_type = self._classify_error(error)

        self.logger.error(
            f"Error Type: {error_type.value} | {str(error)}",
            exc_info=error
        )

        if context:
            self.logger.error(f"Error Context: {context}")

        self.logger.debug(
            "Traceback: " + "".join(traceback.format_exception(type(error), error, error.__traceback__))
        )

    def safe_execute(
        self,
        func: Callable,
        *args,
        default_return: Any = None,
        log_errors: bool = True,
        **kwargs
    ) -> Any:
        """
        Führt Funktion sicher aus und gibt default_return bei Fehler zurück

        Args:
            func: Auszuführende Funktion
            default_return: Rückgabewert bei Fehler
            log_errors: Ob Fehler geloggt werden sollen

        Returns:
            Ergebnis der Funktion oder default_return
        """
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if log_errors:
                self.log_error(e, context={
                    'function': getattr(func, '__name__', repr(func)),
                    'args': str(args)[:100],
                    'kwargs': str(kwargs)[:100]
                })
            return default_return


# Globale Error Handler Instanz
error_handler = ErrorHandler()
