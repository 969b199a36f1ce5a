"""
Loader exceptions raised while reading configuration sources.
"""

from .base import LoaderError


class SourceUnreadable(LoaderError):
    """Raised when the configuration source does not exist or cannot be read."""

    def __init__(self, source: str):
        super().__init__(source, "the file is missing or not readable")


class ParseFailure(LoaderError):
    """Raised when the configuration data cannot be parsed."""

    def __init__(self, source: str, fmt: str, reason: str = None):
        self.fmt = fmt
        detail = f"invalid {fmt} data"
        if reason:
            detail += f" ({reason})"
        super().__init__(source, detail)


class UnsupportedFormat(LoaderError):
    """Raised when no loader is registered for the requested format."""

    def __init__(self, fmt: str, source: str = None):
        self.fmt = fmt
        super().__init__(source, f"the configuration format '{fmt}' is not supported")


class InvalidParseResult(LoaderError):
    """Raised when parsing succeeds but does not produce a mapping."""

    def __init__(self, source: str, result_type: str):
        self.result_type = result_type
        super().__init__(
            source,
            f"the parsed configuration data should be a mapping, got {result_type}"
        )
