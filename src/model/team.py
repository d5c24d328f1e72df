"""Team record kind."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Team:
    """A team and its members.

    Attributes:
        name: Display name of the team.
        internal_slack_channel: Channel used for internal team chat.
        members: Names of team members, in maintained order.
    """

    name: str = ""
    internal_slack_channel: str = ""
    members: list[str] = field(default_factory=list)
