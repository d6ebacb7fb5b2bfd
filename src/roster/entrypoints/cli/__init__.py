"""Command-line entrypoint for ROSTER."""
