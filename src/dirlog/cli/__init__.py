"""Command-line interface for dirlog."""
