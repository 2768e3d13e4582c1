"""Custom exception types for getopts."""

from __future__ import annotations


class GetoptsError(Exception):
    """Base class for all getopts errors."""


class SpecError(ValueError, GetoptsError):
    """Malformed command or option specification (programmer error)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UsageError(GetoptsError):
    """End-user input error found while scanning arguments."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
