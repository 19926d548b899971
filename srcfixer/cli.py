"""srcfix CLI - main entry point."""

import platform
import sys

import click

from srcfixer import __version__
from srcfixer.config_runtime import load_runtime_config
from srcfixer.processor import InputNotFoundError, run_batch
from srcfixer.selection import FileSelector
from srcfixer.ui import print_status
from srcfixer.utils.error_handler import handle_exceptions
from srcfixer.utils.exit_codes import ExitCodes

if platform.system() == "Windows":
    import codecs

    sys.stdout = codecs.getwriter("utf-8")(sys.stdout.buffer, "strict")
    sys.stderr = codecs.getwriter("utf-8")(sys.stderr.buffer, "strict")


def is_truthy(value: str | None) -> bool:
    """Interpret the positional dry-run argument: empty and "0" are false."""
    return value is not None and value not in ("", "0")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@handle_exceptions
@click.version_option(version=__version__, prog_name="srcfix")
@click.argument("path", required=False)
@click.argument("dry_run_arg", metavar="[DRY_RUN]", required=False)
@click.option("--dry-run", "dry_run_flag", is_flag=True, help="Print results instead of writing files")
@click.option("--include", multiple=True, help="Regexp of paths to process (replaces configured list)")
@click.option("--exclude", multiple=True, help="Regexp of paths to skip (replaces configured list)")
@click.option("--keep-markers", is_flag=True, help="Do not remove '// $Id$' marker comments")
@click.option("--root", default=".", help="Directory holding .srcfix/config.json")
@click.pass_context
def cli(ctx, path, dry_run_arg, dry_run_flag, include, exclude, keep_markers, root):
    """Normalize whitespace and inline comments of a file or directory tree.

    PATH is processed recursively when it is a directory. If DRY_RUN is
    given, results are printed and files are left untouched.

    \b
    Fixes applied, in order:
      - line breaks converted to LF
      - trailing whitespace removed
      - exactly one final line break
      - "// $Id$" marker comments removed
      - "//" comments: one space after the slashes, capitalized first
        letter, terminal punctuation at the end of each comment block

    \b
    Examples:
      srcfix sites/all/modules/custom          # Fix files in place
      srcfix sites/all/modules/custom 1        # Dry run
      srcfix . --include '\\.js$' --dry-run     # Only JavaScript files
    """
    if path is None:
        click.echo("Should be used as follows:")
        click.echo(ctx.get_help())
        sys.exit(ExitCodes.USAGE)

    config = load_runtime_config(root)

    selector = FileSelector(
        include_patterns=list(include) if include else config["selection"]["include"],
        exclude_patterns=list(exclude) if exclude else config["selection"]["exclude"],
    )
    strip_markers = config["fixers"]["strip_markers"] and not keep_markers
    dry_run = dry_run_flag or is_truthy(dry_run_arg)

    try:
        run_batch(
            path,
            selector,
            dry_run=dry_run,
            strip_markers=strip_markers,
            encoding=config["output"]["encoding"],
        )
    except InputNotFoundError:
        print_status("File or directory not found.")
        sys.exit(ExitCodes.NOT_FOUND)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
