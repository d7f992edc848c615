"""
Core package for the Wonde Roster application.

Contains configuration loading, logging setup and the global error handler.
"""
