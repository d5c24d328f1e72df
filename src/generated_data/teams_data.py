"""Generated teams records. DO NOT EDIT.

Regenerate with ``roster generate``.
"""

from model.team import Team

TEAMS: tuple[Team, ...] = (
    Team(name="Platform Team", internal_slack_channel="#platform", members=["alice", "bob"]),
    Team(name="Developer Experience", internal_slack_channel="#devex", members=["carol", "dave", "erin"]),
    Team(name="Security", internal_slack_channel="#security", members=[]),
)
