#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core configuration module for the Wonde Roster application.

This module provides centralized configuration management including:
- Environment variable loading
- API credentials and endpoints
- Logging setup
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

from ..exceptions import ConfigError

# Base directory for the package
BASE_DIR = Path(__file__).parent.parent


def load_environment():
    """Load environment variables from .env file."""
    # Try to find .env file in several possible locations
    possible_paths = [
        BASE_DIR / '.env',          # Package directory
        BASE_DIR.parent / '.env',   # Project root
        Path('.env')                # Current working directory
    ]

    for path in possible_paths:
        if path.exists():
            load_dotenv(dotenv_path=path)
            break

# Load environment on import
load_environment()

DEFAULT_API_BASE_URL = 'https://api.wonde.com/v1.0'

# Environment variables with defaults
LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
LOG_FILE = os.getenv('LOG_FILE', 'wonde_roster.log')
API_BASE_URL = os.getenv('WONDE_API_BASE_URL', DEFAULT_API_BASE_URL).rstrip('/')
USE_COLOR = 'NO_COLOR' not in os.environ

# API credentials
API_KEYS = {
    'access_token': os.getenv('WONDE_ACCESS_TOKEN', ''),
    'school_id': os.getenv('WONDE_SCHOOL_ID', '')
}


def require_credentials():
    """
    Return the configured API credentials.

    Returns:
        tuple: (access_token, school_id)

    Raises:
        ConfigError: If either value is missing
    """
    missing = [name for name, key in (('WONDE_ACCESS_TOKEN', 'access_token'),
                                      ('WONDE_SCHOOL_ID', 'school_id'))
               if not API_KEYS[key]]
    if missing:
        raise ConfigError(f"Missing configuration: {', '.join(missing)}")
    return API_KEYS['access_token'], API_KEYS['school_id']


# Logging configuration
def get_log_level():
    """Convert string log level to logging constant."""
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(LOG_LEVEL.upper(), logging.WARNING)

# Import logger here to avoid circular imports
from .logger import setup_logging
logger = setup_logging(get_log_level(), LOG_FILE)
