"""
Error Types and Context Definitions

This module defines standardized error types and context information for
consistent error handling across the front controller.
"""

from enum import Enum
from typing import Dict, Any, Optional
from fastapi import status


class ErrorType(Enum):
    """Enumeration of standard error types in the system."""

    # Not Found Errors (404)
    CONTROLLER_NOT_FOUND = ("controller_not_found", status.HTTP_404_NOT_FOUND, "Controller not found: {controller_class}")
    ACTION_NOT_FOUND = ("action_not_found", status.HTTP_404_NOT_FOUND, "Action not found: {action}() in controller {controller_class}")

    # Server Errors (500)
    INTERNAL_SERVER_ERROR = ("internal_server_error", status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred.")

    def __init__(self, code: str, status_code: int, message_template: str):
        self.code = code
        self.status_code = status_code
        self.message_template = message_template

    def format_message(self, **kwargs) -> str:
        """Format the error message with provided parameters."""
        try:
            return self.message_template.format(**kwargs)
        except KeyError:
            # Fallback to template if formatting fails
            return self.message_template

    def create_error_detail(self, **kwargs) -> Dict[str, Any]:
        """Create standardized error detail dictionary."""
        return {
            "error": {
                "message": self.format_message(**kwargs),
                "code": self.code
            }
        }


class ErrorContext:
    """Context information for error handling."""

    def __init__(
        self,
        request_id: Optional[str] = None,
        controller_class: Optional[str] = None,
        action: Optional[str] = None,
        **additional_context
    ):
        self.request_id = request_id
        self.controller_class = controller_class
        self.action = action
        self.additional_context = additional_context

    def to_log_context(self) -> Dict[str, Any]:
        """Convert context to a line logger context mapping."""
        context = {
            "log_type": "error"
        }

        if self.request_id:
            context["request_id"] = self.request_id
        if self.controller_class:
            context["controller_class"] = self.controller_class
        if self.action:
            context["action"] = self.action

        context.update(self.additional_context)
        return context
