"""
Base exception classes for the microconfig package.
"""


class MicroConfigError(Exception):
    """Base exception for all microconfig errors."""
    pass


class SchemaError(MicroConfigError):
    """Base exception for malformed schema definitions."""
    pass


class ValidationError(MicroConfigError):
    """Base exception for configuration data that does not satisfy its rules."""

    def __init__(self, path: str, key: str = None, message: str = None):
        self.path = path
        self.key = key if key is not None else path
        self.message = message or f"Validation error for '{path}'"
        super().__init__(self.message)


class LoaderError(MicroConfigError):
    """Base exception for failures while reading configuration sources."""

    def __init__(self, source: str = None, reason: str = None):
        self.source = source
        self.reason = reason
        message = "Cannot load configuration"
        if source:
            message += f" from '{source}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
