"""
Main package for the Wonde Roster application.

This is the root package that contains all application modules including:
- core: Configuration, logging and error handling
- api: Wonde API client and its exceptions
- aggregator / renderer: Grouping and console output of class rosters
"""

__version__ = "1.0.0"
