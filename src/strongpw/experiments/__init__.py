"""Experiments comparing table and hash function behavior."""
