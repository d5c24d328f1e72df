"""Shared configuration, errors and logging for Roster."""
