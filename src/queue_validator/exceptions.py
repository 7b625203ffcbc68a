"""Custom exceptions for the queue validator package."""


class QueueValidatorError(Exception):
    """Base exception for queue validator errors."""

    pass


class InvalidTrackError(QueueValidatorError, ValueError):
    """Raised when a track is constructed with invalid data."""

    pass


class ConfigurationError(QueueValidatorError, ValueError):
    """Raised when rotation thresholds are invalid."""

    pass


class ParseError(QueueValidatorError):
    """Raised when a queue file cannot be parsed."""

    pass
