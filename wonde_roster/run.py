#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Wonde Roster Launcher
Asks for an employee ID and prints that teacher's students by day, class and period.
"""

import sys

from .api.client import WondeClient
from .aggregator import fetch_students_by_day
from .core.config import API_BASE_URL, logger, require_credentials
from .core.error_handler import setup_global_exception_handler
from .exceptions import ConfigError, WondeError
from .renderer import print_students_by_day


def read_employee_id(prompt='Enter your employee ID: '):
    """Read the employee ID from standard input."""
    employee_id = input(prompt).strip()
    if not employee_id:
        raise ConfigError('No employee ID given.')
    return employee_id


def main():
    setup_global_exception_handler()

    try:
        access_token, school_id = require_credentials()
        employee_id = read_employee_id()
        with WondeClient(access_token, school_id, base_url=API_BASE_URL) as client:
            students_by_day = fetch_students_by_day(client, employee_id)
    except (WondeError, EOFError) as e:
        message = str(e) or 'No employee ID given.'
        logger.debug(f"Run aborted: {message}")
        print(f"An error occurred: {message}")
        return 1

    print_students_by_day(students_by_day)
    return 0


if __name__ == "__main__":
    sys.exit(main())
