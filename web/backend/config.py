#!/usr/bin/env python3
"""
Configuration access for the receipt points web application.
"""

from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from YAML file and applies environment variable overrides.
    Result is cached for the lifetime of the process.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config()
