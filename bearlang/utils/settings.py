"""
Configuration settings for bearlang.

This module contains default configuration values and settings used
throughout the front end and the command-line interface.
"""

from dataclasses import dataclass


@dataclass
class Settings:
    """Front end settings and configuration.

    Attributes:
        prompt: Prompt printed by the interactive read loop
        source_suffix: File suffix accepted for source files
        encoding: Encoding used to read source files
        capture_values: Parse let/return values into the tree instead of
            skipping over them to the semicolon
        error_recovery: After a failed let/return rule, skip to the next
            semicolon so the following statement starts cleanly
    """
    prompt: str = ">>"
    source_suffix: str = ".bl"
    encoding: str = "utf-8"
    capture_values: bool = True
    error_recovery: bool = True


# Global default settings instance
DEFAULT_SETTINGS = Settings()
