from typing import Optional


class LogInitError(RuntimeError):
    """Raised when the line logger cannot prepare a log directory or open a sink."""
    def __init__(self, message: str, path: Optional[str] = None, original_exception: Exception = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.original_exception = original_exception


class InvalidContextKey(ValueError):
    """Raised by a write call when a context key contains characters outside [A-Za-z0-9_]."""
    def __init__(self, key: str):
        super().__init__(f"Invalid context key for logger: {key}")
        self.key = key


class ViewNotFound(RuntimeError):
    """Raised by a controller when the requested view template does not exist."""
    def __init__(self, view_file: str):
        super().__init__(f"View not found: {view_file}")
        self.view_file = view_file
