"""
Wonde API package for the Wonde Roster application.

This package contains the HTTP client used to fetch employee, class and
student data from the Wonde school-information API.
"""

from .client import WondeClient
from ..exceptions import ApiError, ConfigError, EmployeeDataError, RequestError, WondeError
