"""Centralized error handler for srcfix commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from srcfixer.utils.logging import logger


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator turning unexpected failures into a logged ClickException.

    Click's own exceptions and SystemExit pass through so exit codes chosen
    by the command survive.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """Inner wrapper that implements the try-except logic."""
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            error_type = type(e).__name__
            error_msg = str(e)

            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=error_msg,
            )

            raise click.ClickException(f"{error_type}: {error_msg}") from e

    return wrapper
