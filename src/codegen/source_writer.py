"""Atomic persistence of generated source units.

The destination is replaced only after the full text has been written
and flushed to a sibling temporary file, so a failed run never leaves
a partial module behind.
"""

from __future__ import annotations

import os
from pathlib import Path
import tempfile

from core.errors import RosterWriteError

_GENERATED_FILE_MODE = 0o644


def write_source_unit(destination: Path, text: str) -> None:
    """Create or overwrite a generated source file atomically.

    Args:
        destination: Target module path.
        text: Full module text.

    Raises:
        RosterWriteError: If the directory or file cannot be written.
    """
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        file_descriptor, temp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
        )
    except OSError as error:
        raise RosterWriteError(destination, str(error)) from error
    temp_path = Path(temp_name)
    try:
        with os.fdopen(file_descriptor, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_path, _GENERATED_FILE_MODE)
        os.replace(temp_path, destination)
    except (OSError, UnicodeError) as error:
        temp_path.unlink(missing_ok=True)
        raise RosterWriteError(destination, str(error)) from error
