"""
Main Error Handler

This module provides the main error handling utility for creating standardized
HTTPExceptions with proper logging.
"""

from typing import Optional
from fastapi import HTTPException

from ..logging import LineLogger
from .error_types import ErrorType, ErrorContext
from .error_logger import ErrorLogger


class ErrorHandler:
    """Centralized error handling utility."""

    @staticmethod
    def create_http_exception(
        error_type: ErrorType,
        logger: Optional[LineLogger] = None,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
        **format_kwargs
    ) -> HTTPException:
        """
        Create a standardized HTTPException, logging it when a logger is given.

        Args:
            error_type: The type of error to create
            logger: Line logger to record the error with; None skips logging
            context: Error context information
            original_exception: Original exception that caused this error
            **format_kwargs: Additional kwargs for message formatting

        Returns:
            HTTPException with standardized format
        """
        if context is None:
            context = ErrorContext()

        format_dict = {**context.__dict__, **format_kwargs}
        error_detail = error_type.create_error_detail(**format_dict)

        if logger is not None:
            ErrorLogger.log_error(
                logger=logger,
                error_type=error_type,
                context=context,
                original_exception=original_exception,
            )

        return HTTPException(
            status_code=error_type.status_code,
            detail=error_detail
        )

    @staticmethod
    def handle_controller_not_found(controller_class: str, context: ErrorContext, logger: Optional[LineLogger] = None) -> HTTPException:
        """Handle unknown controller error."""
        context.controller_class = controller_class
        return ErrorHandler.create_http_exception(
            error_type=ErrorType.CONTROLLER_NOT_FOUND,
            logger=logger,
            context=context
        )

    @staticmethod
    def handle_action_not_found(action: str, controller_class: str, context: ErrorContext, logger: Optional[LineLogger] = None) -> HTTPException:
        """Handle missing action error."""
        context.action = action
        context.controller_class = controller_class
        return ErrorHandler.create_http_exception(
            error_type=ErrorType.ACTION_NOT_FOUND,
            logger=logger,
            context=context
        )

    @staticmethod
    def handle_internal_server_error(
        context: ErrorContext,
        logger: Optional[LineLogger] = None,
        original_exception: Optional[Exception] = None
    ) -> HTTPException:
        """Handle internal server errors."""
        return ErrorHandler.create_http_exception(
            error_type=ErrorType.INTERNAL_SERVER_ERROR,
            logger=logger,
            context=context,
            original_exception=original_exception
        )
