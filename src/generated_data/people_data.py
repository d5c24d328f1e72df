"""Generated people records. DO NOT EDIT.

Regenerate with ``roster generate``.
"""

from model.person import Person

PEOPLE: tuple[Person, ...] = (
    Person(name="Alice Archer", email="alice@example.com", slack_handle="@alice", teams=["Platform Team"]),
    Person(name="Bob Baker", email="bob@example.com", slack_handle="@bob", teams=["Platform Team"]),
    Person(name="Carol Chen", email="carol@example.com", slack_handle="@carol", teams=["Developer Experience"]),
    Person(name="Dave Diaz", email="dave@example.com", slack_handle="@dave", teams=["Developer Experience"]),
    Person(name="Erin Evans", email="erin@example.com", slack_handle="@erin", teams=["Developer Experience", "Security"]),
)
