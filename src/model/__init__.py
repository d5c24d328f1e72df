"""Record kinds served by Roster."""

from __future__ import annotations

from model.person import Person
from model.team import Team

__all__ = ["Person", "Team"]
