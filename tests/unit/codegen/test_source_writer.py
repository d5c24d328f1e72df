"""Unit tests for atomic generated-source writes."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from codegen.source_writer import write_source_unit
from core.errors import RosterWriteError


def test_write_source_unit_creates_file_and_directories(tmp_path: Path) -> None:
    """Writer should create missing parent directories."""
    destination = tmp_path / "generated" / "teams_data.py"

    write_source_unit(destination, "TEAMS = ()\n")

    assert destination.read_text(encoding="utf-8") == "TEAMS = ()\n"
    assert list(destination.parent.iterdir()) == [destination]


def test_write_source_unit_overwrites_existing_file(tmp_path: Path) -> None:
    """Existing units should be fully replaced, not merged."""
    destination = tmp_path / "teams_data.py"
    destination.write_text("OLD = 1\n" * 50, encoding="utf-8")

    write_source_unit(destination, "NEW = 2\n")

    assert destination.read_text(encoding="utf-8") == "NEW = 2\n"


def test_write_source_unit_raises_for_unwritable_directory(tmp_path: Path) -> None:
    """A parent path that is a file should fail without leaving output."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    destination = blocker / "teams_data.py"

    with pytest.raises(RosterWriteError) as error_info:
        write_source_unit(destination, "TEAMS = ()\n")

    assert error_info.value.path == destination
    assert destination.exists() is False


def test_write_source_unit_removes_temp_file_on_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A failure after writing should leave neither temp file nor target."""
    destination = tmp_path / "teams_data.py"

    def _failing_replace(source: object, target: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _failing_replace)

    with pytest.raises(RosterWriteError):
        write_source_unit(destination, "TEAMS = ()\n")

    assert list(tmp_path.iterdir()) == []


def test_write_source_unit_keeps_previous_file_on_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A failed regeneration should not touch the previous unit."""
    destination = tmp_path / "teams_data.py"
    destination.write_text("TEAMS = ()\n", encoding="utf-8")

    def _failing_replace(source: object, target: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _failing_replace)

    with pytest.raises(RosterWriteError):
        write_source_unit(destination, "TEAMS = (1,)\n")

    assert destination.read_text(encoding="utf-8") == "TEAMS = ()\n"
    assert list(tmp_path.iterdir()) == [destination]
