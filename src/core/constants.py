"""Core constants used across Roster modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path("data")
DEFAULT_OUTPUT_ROOT = Path("src") / "generated_data"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
DATA_FILE_SUFFIX = ".yaml"
GENERATED_FILE_SUFFIX = "_data.py"
GENERATED_PACKAGE_NAME = "generated_data"
DATA_KEY_METADATA = "key"
