"""
Custom exceptions for the readiness engine.

Scoring, compliance and ranking never raise on bad business input; these
cover the edges where the engine reads external data.
"""


class ConvertaError(Exception):
    """Base exception for all engine errors."""
    pass


class DataSourceError(ConvertaError):
    """Error reading data from an external source."""
    pass


class ParsingError(ConvertaError):
    """Error parsing response or data."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)
