"""Command-line interface for StudentSearch."""
