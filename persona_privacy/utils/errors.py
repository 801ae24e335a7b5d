"""
Exception types and error message extraction.
"""

from __future__ import annotations


class InvalidPersonaInputError(TypeError):
    """Raised when the analyzer is handed something other than a list of personas."""


class PersonaLimitExceededError(ValueError):
    """Raised when a request carries more personas than the configured limit."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"Too many personas: {count} exceeds the limit of {limit}")
        self.count = count
        self.limit = limit


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract a displayable message from an unknown error value.

    Exceptions without a message fall back to their class name.
    """
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return "Unknown error"
