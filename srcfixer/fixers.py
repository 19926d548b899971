"""Text fixers and the normalization pipeline applied to each file."""

import re
from collections.abc import Callable

from srcfixer.comments import apply_comment_pass
from srcfixer.utils.logging import logger

Fixer = Callable[[str], str]

# CRLF first so it collapses to a single LF.
LINE_BREAK_RE = re.compile("\r\n|[\r\u0085\u2028\u2029]")

TRAILING_SPACE_RE = re.compile(r"[^\S\n]+$", re.MULTILINE)

MARKER_COMMENT_PATTERNS = (
    # // $Id$
    re.compile(r"^[^\S\n]*//[^\S\n]*\$Id\$.*\n?", re.MULTILINE),
    # // $Id: file.php,v 1.2 2009/01/01 user Exp $
    re.compile(r"^[^\S\n]*//[^\S\n]*\$Id:.*\$[^\S\n]*(?:\n|\Z)", re.MULTILINE),
)


def fix_line_breaks(content: str) -> str:
    """Convert every line terminator to LF."""
    return LINE_BREAK_RE.sub("\n", content)


def fix_end_of_line_spaces(content: str) -> str:
    """Strip horizontal whitespace at the end of every line."""
    return TRAILING_SPACE_RE.sub("", content)


def fix_final_line_breaks(content: str) -> str:
    """Make the content end with exactly one LF."""
    return content.rstrip("\n") + "\n"


def fix_marker_comments(content: str) -> str:
    """Remove version control marker comments such as "// $Id$".

    Removing a last line can expose blank lines, so the final line break is
    enforced again whenever something was removed. A marker-only file
    becomes a single LF.
    """
    removed = 0
    for pattern in MARKER_COMMENT_PATTERNS:
        content, count = pattern.subn("", content)
        removed += count

    if removed:
        return fix_final_line_breaks(content)
    return content


def fix_inline_comments(content: str) -> str:
    """Normalize spacing, capitalization and punctuation of "//" comments."""
    return apply_comment_pass(content)


BASE_FIXERS: tuple[tuple[str, Fixer], ...] = (
    ("line_breaks", fix_line_breaks),
    ("end_of_line_spaces", fix_end_of_line_spaces),
    ("final_line_breaks", fix_final_line_breaks),
)

MARKER_FIXERS: tuple[tuple[str, Fixer], ...] = (
    ("marker_comments", fix_marker_comments),
)

COMMENT_FIXERS: tuple[tuple[str, Fixer], ...] = (
    ("inline_comments", fix_inline_comments),
)


def get_fixers(strip_markers: bool = True) -> tuple[tuple[str, Fixer], ...]:
    """Return the ordered fixer pipeline.

    Marker removal always runs before the comment pass so removed lines
    never count as neighbours.
    """
    if strip_markers:
        return BASE_FIXERS + MARKER_FIXERS + COMMENT_FIXERS
    return BASE_FIXERS + COMMENT_FIXERS


def normalize_text(content: str, strip_markers: bool = True) -> str:
    """Apply every fixer of the pipeline to one file's content."""
    for name, fixer in get_fixers(strip_markers):
        fixed = fixer(content)
        if fixed != content:
            logger.trace("Fixer {name} changed content", name=name)
        content = fixed
    return content
