"""
Configuration Module

Application configuration settings and utilities.
"""

from app.config.settings import DEFAULT_REMINDER_BUCKETS, Settings, get_settings

__all__ = [
    "DEFAULT_REMINDER_BUCKETS",
    "Settings",
    "get_settings",
]
