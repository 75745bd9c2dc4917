"""Error handling decorator for CLI commands."""

from __future__ import annotations

import signal
import sys
from functools import wraps

import click

from studentsearch.core.exceptions import (
    EmptyCorpusError,
    StudentSearchError,
    UninitializedEngineError,
)
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)

# Exit quietly when output is piped into head and the like
try:
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)
except AttributeError:
    pass


def handle_errors(f):
    """Turn exceptions into user-facing messages and abort the command.

    Example:
        @click.command()
        @handle_errors
        def my_command():
            ...
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (click.Abort, click.exceptions.Exit, click.UsageError):
            raise
        except BrokenPipeError:
            sys.stderr.close()
            sys.exit(0)
        except EmptyCorpusError as e:
            click.echo(f"❌ No records to search: {e}", err=True)
            raise click.Abort()
        except UninitializedEngineError as e:
            click.echo(f"❌ {e}", err=True)
            raise click.Abort()
        except StudentSearchError as e:
            click.echo(f"❌ Search error: {e}", err=True)
            logger.debug("StudentSearchError details", exc_info=True)
            raise click.Abort()
        except FileNotFoundError as e:
            click.echo(f"❌ File not found: {e}", err=True)
            raise click.Abort()
        except PermissionError as e:
            click.echo(f"❌ Permission denied: {e}", err=True)
            raise click.Abort()
        except ValueError as e:
            click.echo(f"❌ Invalid value: {e}", err=True)
            logger.debug("ValueError details", exc_info=True)
            raise click.Abort()
        except Exception as e:
            click.echo(f"❌ Unexpected error: {e}", err=True)
            logger.exception("Unexpected error in command")
            raise click.Abort()

    return wrapper
