"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from todo_service.config.settings import settings

    db_url = settings.DATABASE_URL
    role = settings.SERVER_ROLE
"""

from todo_service.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
