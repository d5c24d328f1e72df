"""Runtime configuration model for Roster.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_ROOT,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_ROOT,
    DEFAULT_PORT,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RosterConfigError


@dataclass(frozen=True)
class RosterConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Directory holding ``<collection>.yaml`` source files.
        output_root: Directory receiving generated ``<collection>_data.py`` units.
        host: Bind address for the read-only HTTP responder.
        port: Bind port for the read-only HTTP responder.
        log_level: Minimum structured log level.
    """

    data_root: Path
    output_root: Path
    host: str
    port: int
    log_level: str

    @classmethod
    def from_env(cls) -> "RosterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RosterConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("ROSTER_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        output_root_value = os.getenv("ROSTER_OUTPUT_ROOT", str(DEFAULT_OUTPUT_ROOT))
        host = os.getenv("ROSTER_HOST", DEFAULT_HOST)
        port = _parse_port(os.getenv("ROSTER_PORT", str(DEFAULT_PORT)))
        log_level = _parse_log_level(os.getenv("ROSTER_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            output_root=Path(output_root_value).expanduser().resolve(),
            host=host,
            port=port,
            log_level=log_level,
        )


def _parse_port(raw_value: str) -> int:
    """Parse the HTTP port environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed port number.

    Raises:
        RosterConfigError: If value is not an integer in the TCP port range.
    """
    try:
        port = int(raw_value)
    except ValueError as error:
        raise RosterConfigError(
            "Invalid ROSTER_PORT value: "
            f"expected integer, got '{raw_value}'. "
            "Set ROSTER_PORT to a numeric value."
        ) from error
    if not 1 <= port <= 65535:
        raise RosterConfigError(
            f"Invalid ROSTER_PORT value: {port} is outside 1..65535. "
            "Set ROSTER_PORT to a valid TCP port."
        )
    return port


def _parse_log_level(raw_value: str) -> str:
    level = raw_value.strip().lower()
    if level in SUPPORTED_LOG_LEVELS:
        return level
    supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
    raise RosterConfigError(
        f"Invalid ROSTER_LOG_LEVEL value '{raw_value}'. Use one of: {supported_rows}."
    )
