"""Unit tests for YAML record loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from codegen.record_loader import load_records
from codegen.schema_reflector import describe_record_type
from core.errors import RosterLoadError
from model.team import Team
from tests.fixture_paths import fixture_path

_TEAM_SCHEMA = describe_record_type(Team)


def test_load_records_builds_raw_records_in_file_order() -> None:
    """Records should be built unsanitized and in file order."""
    records = load_records(fixture_path("data/teams.yaml"), Team, _TEAM_SCHEMA)

    assert records == [
        Team(
            name="  Platform Team  ",
            internal_slack_channel="#platform",
            members=[" alice ", "bob "],
        )
    ]


def test_load_records_keeps_scalars_as_written() -> None:
    """YAML booleans and octal-looking numbers should stay text."""
    records = load_records(fixture_path("data/tricky_teams.yaml"), Team, _TEAM_SCHEMA)

    assert records[0].members[1:] == ["yes", "0700"]
    assert records[0].internal_slack_channel == "#line\nbreak"


def test_load_records_defaults_missing_fields(tmp_path: Path) -> None:
    """Missing keys should fall back to empty text and empty lists."""
    data_file = tmp_path / "teams.yaml"
    data_file.write_text("- name: Solo\n- members:\n", encoding="utf-8")

    records = load_records(data_file, Team, _TEAM_SCHEMA)

    assert records == [Team(name="Solo"), Team()]


@pytest.mark.parametrize("content", ["", "[]\n", "# nothing yet\n"])
def test_load_records_accepts_empty_documents(tmp_path: Path, content: str) -> None:
    """Empty documents and empty lists should yield zero records."""
    data_file = tmp_path / "teams.yaml"
    data_file.write_text(content, encoding="utf-8")

    assert load_records(data_file, Team, _TEAM_SCHEMA) == []


def test_load_records_raises_for_missing_file(tmp_path: Path) -> None:
    """Missing data file should fail with the path attached."""
    missing_path = tmp_path / "teams.yaml"

    with pytest.raises(RosterLoadError) as error_info:
        load_records(missing_path, Team, _TEAM_SCHEMA)

    assert error_info.value.path == missing_path


@pytest.mark.parametrize(
    "fixture_name", ["data/unknown_key_teams.yaml", "data/not_a_list.yaml"]
)
def test_load_records_raises_for_malformed_structure(fixture_name: str) -> None:
    """Unknown keys and non-list documents should be rejected."""
    with pytest.raises(RosterLoadError):
        load_records(fixture_path(fixture_name), Team, _TEAM_SCHEMA)


@pytest.mark.parametrize(
    "content",
    [
        "- name: [a, b]\n",
        "- members: alice\n",
        "- members:\n    - [nested]\n",
        "- just text\n",
        "- name: 'unterminated\n",
    ],
)
def test_load_records_raises_for_wrong_value_shapes(tmp_path: Path, content: str) -> None:
    """Values of the wrong shape and invalid YAML should fail to load."""
    data_file = tmp_path / "teams.yaml"
    data_file.write_text(content, encoding="utf-8")

    with pytest.raises(RosterLoadError):
        load_records(data_file, Team, _TEAM_SCHEMA)


def test_load_records_treats_plain_nulls_as_missing(tmp_path: Path) -> None:
    """Plain null scalars should become empty text and empty lists."""
    data_file = tmp_path / "teams.yaml"
    data_file.write_text(
        "- name: ~\n  internal_slack_channel: null\n  members: null\n"
        "- name: Ops\n  members: [alice, ~]\n",
        encoding="utf-8",
    )

    records = load_records(data_file, Team, _TEAM_SCHEMA)

    assert records == [Team(), Team(name="Ops", members=["alice", ""])]


def test_load_records_keeps_quoted_nulls_as_text(tmp_path: Path) -> None:
    """Quoted null spellings are ordinary text."""
    data_file = tmp_path / "teams.yaml"
    data_file.write_text("- name: \"~\"\n  internal_slack_channel: 'null'\n", encoding="utf-8")

    records = load_records(data_file, Team, _TEAM_SCHEMA)

    assert (records[0].name, records[0].internal_slack_channel) == ("~", "null")


def test_load_records_accepts_null_document(tmp_path: Path) -> None:
    """A document that is just null should yield zero records."""
    data_file = tmp_path / "teams.yaml"
    data_file.write_text("null\n", encoding="utf-8")

    assert load_records(data_file, Team, _TEAM_SCHEMA) == []
