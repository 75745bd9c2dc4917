"""CLI decorators for common options and error handling."""

from studentsearch.cli.decorators.error_handling import handle_errors
from studentsearch.cli.decorators.options import (
    with_max_results,
    with_output_format,
    with_records_file,
)

__all__ = [
    "handle_errors",
    "with_max_results",
    "with_output_format",
    "with_records_file",
]
