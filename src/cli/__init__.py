"""Command-line entry points for Roster."""
