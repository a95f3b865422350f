"""Configuration errors."""

from __future__ import annotations


class ConfigError(ValueError):
    """Base error for an invalid test configuration."""


class MissingPrerequisiteError(ConfigError):
    """A capability the add-on depends on is not configured."""

    def __init__(self, message: str, prerequisite: str):
        super().__init__(message)
        self.prerequisite = prerequisite


class MissingRequiredFieldError(ConfigError):
    """A field with no safe default is empty."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field
