"""Closed list of generated collections."""

from __future__ import annotations

from dataclasses import dataclass

from model.person import Person
from model.team import Team


@dataclass(frozen=True)
class GenerationTarget:
    """One record kind and the collection generated for it.

    Attributes:
        record_kind: Singular record kind name, e.g. ``team``.
        collection_name: Plural collection name, e.g. ``teams``.
        record_type: Record class constructed for each data row.
    """

    record_kind: str
    collection_name: str
    record_type: type


GENERATION_TARGETS: tuple[GenerationTarget, ...] = (
    GenerationTarget(record_kind="person", collection_name="people", record_type=Person),
    GenerationTarget(record_kind="team", collection_name="teams", record_type=Team),
)
