"""Exceptions raised by the setup tools."""

from typing import Optional


class SetupError(Exception):
    """Base class for setup failures reported to the user."""


class ConnectionCheckError(SetupError):
    """The WordPress credential check did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SecretsCommandError(SetupError):
    """The secrets CLI could not store a value."""

    def __init__(self, key: str, message: str):
        super().__init__(f"Failed to set secret {key}: {message}")
        self.key = key
