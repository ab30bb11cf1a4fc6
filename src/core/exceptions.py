"""
Core Exceptions
================

Custom exceptions raised at the application boundaries.

Storage errors from SQLAlchemy are deliberately not wrapped here; they reach
the global exception handler as-is.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationException(ApplicationException):
    """Exception for configuration errors detected at startup."""

    def __init__(self, setting: str, message: Optional[str] = None):
        self.setting = setting
        super().__init__(
            message or f"Required setting '{setting}' is missing",
            {"setting": setting}
        )
