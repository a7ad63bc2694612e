"""User-facing output helpers."""

from typing import Any

import click

from skillsync.models.extraction import ExtractionResult


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a message for the user on stderr."""
    click.echo(message, err=True, nl=nl)


def success(message: str) -> None:
    user_output(f"{click.style('✓', fg='green')} {message}")


def warning(message: str) -> None:
    user_output(click.style(f"! {message}", fg="yellow"))


def format_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes} B"
    size = num_bytes / 1024
    for unit in ("KB", "MB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def report_extraction(result: ExtractionResult) -> None:
    """Print file counts and any per-file warnings for an extraction."""
    user_output(f"  Wrote {len(result.written)} file(s), kept {len(result.skipped)} existing")
    if result.errors:
        warning(f"Completed with {result.warning_count} warning(s):")
        for failure in result.errors:
            user_output(f"    {failure.path}: {failure.message}")
