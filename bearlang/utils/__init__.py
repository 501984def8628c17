"""
Utility modules for bearlang.

This package contains helpers shared by the front end and the CLI.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
