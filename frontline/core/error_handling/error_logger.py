"""
Error Logging Utility

Writes HTTP-layer errors to the line logger in one consistent shape.
"""

from typing import Dict, Any, Optional

from ..logging import LineLogger
from .error_types import ErrorType, ErrorContext


class ErrorLogger:
    """Единый логгер ошибок, использующий общую систему."""

    @staticmethod
    def log_error(
        logger: LineLogger,
        error_type: ErrorType,
        context: ErrorContext,
        original_exception: Optional[Exception] = None,
        additional_data: Optional[Dict[str, Any]] = None
    ):
        """Логировать ошибку с использованием единой системы."""
        log_context = context.to_log_context()
        log_context["error_code"] = error_type.code
        log_context["http_status_code"] = error_type.status_code

        if original_exception is not None:
            log_context["exception_type"] = type(original_exception).__name__
            log_context["exception"] = str(original_exception)

        if additional_data:
            log_context.update(additional_data)

        message = error_type.format_message(**context.__dict__)

        # 4xx are the caller's problem and stay out of error.log
        if error_type.status_code >= 500:
            logger.error(message, log_context)
        else:
            logger.warn(message, log_context)
