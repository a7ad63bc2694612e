"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and prints a clean
``Error: ...`` line instead of a stack trace. Anything else bubbles up.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from skillsync.errors import SkillsyncError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns predictable failures into exit code 1.

    Catches:
        - SkillsyncError: manifest, network, archive and registry errors
        - FileExistsError / FileNotFoundError: filesystem conflicts
        - ValueError: invalid input or configuration
        - PermissionError: permission denied errors

    With ``--debug`` the traceback is logged before exiting.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (
            SkillsyncError,
            FileExistsError,
            FileNotFoundError,
            ValueError,
            PermissionError,
        ) as e:
            logger.debug("Command failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
