"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from todoly.models import SaveError, TaskNotFoundError, TaskValidationError, TodolyError
from todoly.utils import exit_codes
from todoly.utils.logger import get_logger
from todoly.utils.ui.formatters import format_error


def exit_code_for(error: TodolyError) -> int:
    """Map a domain error to its semantic exit code."""
    if isinstance(error, TaskValidationError):
        return exit_codes.ERROR_INVALID_ARGS
    if isinstance(error, TaskNotFoundError):
        return exit_codes.ERROR_NOT_FOUND
    if isinstance(error, SaveError):
        return exit_codes.ERROR_STORAGE
    return exit_codes.ERROR_GENERAL


def command_wrapper(func: Callable):
    """Decorator to wrap command functions with logging and error mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TodolyError as e:
            elapsed = time.monotonic() - start
            code = exit_code_for(e)
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                exit_codes.get_exit_code_name(code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
