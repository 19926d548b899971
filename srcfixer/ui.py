"""Central UI handler for srcfixer.

Single source of truth for Rich console output. Import this instead of
instantiating Console() in every module.

Usage:
    from srcfixer.ui import console, print_status

    print_status("3 files to process. In progress...")
"""

import sys

import click
from rich.console import Console

# Single console instance - import this, don't create your own
console = Console(force_terminal=sys.stdout.isatty())


def print_status(msg: str = "") -> None:
    """Print a status line verbatim (no markup, no wrapping)."""
    console.print(msg, markup=False, highlight=False, soft_wrap=True)


def print_file_block(file_path: str, content: str) -> None:
    """Print a dry-run result: a "File:" headline, its underline and the content.

    The content is echoed raw so tabs and brackets survive untouched.
    """
    headline = f"File: {file_path}"
    click.echo("")
    click.echo(headline)
    click.echo("-" * len(headline))
    click.echo(content, nl=False)
    click.echo("")
