"""
Exceptions raised by the Wonde Roster application.

Every error that should end a run with a single message derives from
WondeError, so the entry point only has to catch one type.
"""


class WondeError(Exception):
    """Base class for all Wonde Roster errors."""


class ConfigError(WondeError):
    """Missing or invalid configuration (credentials, employee ID)."""


class RequestError(WondeError):
    """The HTTP request could not be completed (transport failure)."""


class ApiError(WondeError):
    """The API answered with an error status or an unreadable body."""

    def __init__(self, message, status_code=None):
        super().__init__(f"API response error: {message}")
        self.message = message
        self.status_code = status_code


class EmployeeDataError(WondeError):
    """The employee payload is unusable (no classes, missing fields)."""
