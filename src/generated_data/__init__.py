"""Literal record collections written by ``roster generate``."""
