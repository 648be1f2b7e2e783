"""Vocabulary trainer client: practice sessions, list queries and notifications."""

__version__ = "0.1.0"
