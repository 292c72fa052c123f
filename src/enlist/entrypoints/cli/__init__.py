"""Command-line interface for ENLIST."""
