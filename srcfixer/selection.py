"""File selection - decides which files of a tree get processed."""

import os
import re
from collections.abc import Iterable, Iterator

from srcfixer.utils.logging import logger


def normalize_path(path: str) -> str:
    """Normalize path to POSIX style so patterns only need forward slashes."""
    # Replace backslashes with forward slashes
    path = path.replace("\\", "/")
    # Remove leading ./
    if path.startswith("./"):
        path = path[2:]
    return path


class FileSelector:
    """Matches paths against inclusion and exclusion regexps.

    A path is selected when it matches at least one inclusion pattern and no
    exclusion pattern. Exclusion has priority.
    """

    def __init__(self, include_patterns: Iterable[str], exclude_patterns: Iterable[str] = ()):
        self.include = [re.compile(pattern) for pattern in include_patterns]
        self.exclude = [re.compile(pattern) for pattern in exclude_patterns]

    def should_process(self, file_path: str) -> bool:
        """Check whether a file should be processed."""
        file_path = normalize_path(file_path)

        if not any(regexp.search(file_path) for regexp in self.include):
            return False

        return not any(regexp.search(file_path) for regexp in self.exclude)


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable directory {path}: {err}", path=error.filename, err=error.strerror)


def walk_files(root: str) -> Iterator[str]:
    """Yield every file below root, recursively, in sorted order.

    Unreadable directories are skipped and symlinked directories are not
    followed.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            yield os.path.join(dirpath, filename)


def collect_paths(root: str, selector: FileSelector) -> list[str]:
    """Return the files below root accepted by the selector."""
    paths = []
    for file_path in walk_files(root):
        if selector.should_process(file_path):
            paths.append(file_path)
        else:
            logger.trace("Skipping {path}", path=file_path)
    return paths
