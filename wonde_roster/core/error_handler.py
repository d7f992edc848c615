"""
Global error handler for the Wonde Roster application.

Unhandled exceptions are written to the application log before the
interpreter prints its usual traceback.
"""

import sys

from .config import logger


def handle_exception(exc_type, exc_value, exc_traceback):
    """
    Global exception handler that logs unhandled exceptions.

    Args:
        exc_type: Exception type
        exc_value: Exception value
        exc_traceback: Exception traceback
    """
    if issubclass(exc_type, KeyboardInterrupt):
        # Don't log keyboard interrupts
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logger.error(
        "Unhandled exception",
        exc_info=(exc_type, exc_value, exc_traceback)
    )
    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def setup_global_exception_handler():
    """Set up the global exception handler."""
    sys.excepthook = handle_exception
    logger.debug("Global exception handler installed")
