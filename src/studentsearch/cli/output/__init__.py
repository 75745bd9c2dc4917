"""Output formatting for CLI commands."""

from studentsearch.cli.output.formatters import OutputFormatter

__all__ = ["OutputFormatter"]
