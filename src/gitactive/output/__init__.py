"""Reporters — plain text and JSON."""
