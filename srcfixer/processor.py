"""File processing - reads, fixes and writes back or prints each file."""

import os
import time
from dataclasses import dataclass
from pathlib import Path

from srcfixer.fixers import normalize_text
from srcfixer.selection import FileSelector, collect_paths
from srcfixer.ui import print_file_block, print_status
from srcfixer.utils.logging import logger


class InputNotFoundError(Exception):
    """Raised when the input path is neither a file nor a directory."""

    def __init__(self, path: str):
        super().__init__(f"File or directory not found: {path}")
        self.path = path


@dataclass
class BatchResult:
    """Outcome of one run over a set of files."""

    total: int = 0
    changed: int = 0
    elapsed_seconds: float = 0.0


def format_number(value: float) -> str:
    """Round to 2 decimals and drop trailing zeros (50.0 -> "50")."""
    return f"{round(value, 2):.2f}".rstrip("0").rstrip(".")


def format_progress(done: int, total: int) -> str:
    percentage = (done / total) * 100
    return f"{done}/{total} files processed ({format_number(percentage)}%)."


def format_summary(total: int, elapsed_seconds: float) -> str:
    seconds = round(elapsed_seconds, 2)
    minutes = seconds / 60
    return (
        f"{total} files processed in {format_number(seconds)} seconds "
        f"({format_number(minutes)} minutes)."
    )


def process_file(
    file_path: str,
    dry_run: bool = False,
    strip_markers: bool = True,
    encoding: str = "utf-8",
) -> bool:
    """Apply every fixer to one file.

    In dry-run mode the result is printed instead of being saved. Read and
    write errors propagate.

    Returns:
        True if the fixed content differs from what was read.
    """
    path = Path(file_path)
    # newline="" keeps CR/CRLF visible to the line break fixer.
    with open(path, encoding=encoding, newline="") as f:
        original = f.read()

    fixed = normalize_text(original, strip_markers=strip_markers)
    changed = fixed != original

    if dry_run:
        print_file_block(file_path, fixed)
    else:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(fixed)
        logger.debug("{state} {path}", state="Fixed" if changed else "Unchanged", path=file_path)

    return changed


def resolve_paths(input_path: str, selector: FileSelector) -> list[str]:
    """Turn the input path into the list of files to process.

    A single file is always processed; a directory is walked and filtered
    through the selector.
    """
    if os.path.isfile(input_path):
        return [input_path]

    if os.path.isdir(input_path):
        print_status("Browsing files...")
        paths = collect_paths(input_path, selector)
        logger.debug("Selected {count} files under {root}", count=len(paths), root=input_path)
        return paths

    raise InputNotFoundError(input_path)


def run_batch(
    input_path: str,
    selector: FileSelector,
    dry_run: bool = False,
    strip_markers: bool = True,
    encoding: str = "utf-8",
) -> BatchResult:
    """Process every selected file under input_path, reporting progress."""
    start_time = time.perf_counter()

    paths = resolve_paths(input_path, selector)
    result = BatchResult(total=len(paths))

    logger.info("Processing {count} files (dry_run={dry_run})", count=result.total, dry_run=dry_run)
    print_status(f"{result.total} files to process. In progress...")
    print_status()

    for i, file_path in enumerate(paths):
        if process_file(file_path, dry_run=dry_run, strip_markers=strip_markers, encoding=encoding):
            result.changed += 1
        print_status(format_progress(i + 1, result.total))

    result.elapsed_seconds = time.perf_counter() - start_time
    print_status()
    print_status(format_summary(result.total, result.elapsed_seconds))
    logger.info("{changed} of {total} files changed", changed=result.changed, total=result.total)

    return result
