"""Roster exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each generation stage raises a specific error type so build failures
can be reported with the failing stage and record kind.
"""

from __future__ import annotations

from pathlib import Path


class RosterError(Exception):
    """Base exception for all Roster failures."""

    stage = "unknown"


class RosterConfigError(RosterError):
    """Raised for invalid runtime configuration."""

    stage = "config"


class RosterLoadError(RosterError):
    """Raised when a record data file is missing or malformed."""

    stage = "load"

    def __init__(self, path: Path, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to load records from {path}: {cause}")


class RosterSchemaError(RosterError):
    """Raised when a value cannot be described as a record type."""

    stage = "reflect"


class RosterUnsupportedFieldKindError(RosterSchemaError):
    """Raised when a record field is neither a string nor a list of strings."""

    def __init__(self, record_kind: str, field_name: str, field_type: object) -> None:
        self.record_kind = record_kind
        self.field_name = field_name
        super().__init__(
            f"Unsupported field kind for {record_kind}.{field_name}: {field_type!r}. "
            "Record fields must be str or a sequence of str."
        )


class RosterRenderError(RosterError):
    """Raised when a code template fails to render."""

    stage = "render"


class RosterWriteError(RosterError):
    """Raised when a generated source unit cannot be written."""

    stage = "write"

    def __init__(self, path: Path, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write generated source to {path}: {cause}")


class RosterServeError(RosterError):
    """Raised when generated collections cannot be served."""

    stage = "serve"
