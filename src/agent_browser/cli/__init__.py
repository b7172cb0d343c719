"""Command-line interface for Agent Browser."""
