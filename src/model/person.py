"""Person record kind."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Person:
    """A person and the teams they belong to.

    Attributes:
        name: Full display name.
        email: Work email address.
        slack_handle: Chat handle, including the leading ``@``.
        teams: Names of teams the person is a member of.
    """

    name: str = ""
    email: str = ""
    slack_handle: str = ""
    teams: list[str] = field(default_factory=list)
