"""Command-line interface for coursebot."""
