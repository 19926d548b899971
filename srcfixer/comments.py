"""Inline comment normalization for "//" style comments.

A comment block is a run of consecutive processable comment lines. Within
a block:
- every line gets exactly one space between "//" and its text,
- the first line gets its first letter capitalized,
- the last line gets terminal punctuation.

Only line-level heuristics are used. Block comments and language syntax are
never parsed.
"""

import re
from dataclasses import dataclass

# Groups: prefix (indent + "//" + optional space), marker (indent + "//"),
# space, body.
COMMENT_RE = re.compile(r"^(?P<prefix>(?P<marker>[^\S\n]*//)(?P<space> ?))(?P<body>.*)$")

# Lines that match COMMENT_RE but are not real comments. Each pattern is
# tested against the whole line.
EXCLUDED_COMMENT_PATTERNS = (
    # HTML comment closer: // -->
    re.compile(r"^[^\S\n]*//[^\S\n]*-->"),
    # Legacy script escapers: //<![CDATA[ and //]]>
    re.compile(r"^[^\S\n]*//[^\S\n]*<!\[CDATA\["),
    re.compile(r"^[^\S\n]*//[^\S\n]*\]\]>"),
)

DIRECTIVE_RE = re.compile(r"^[^\S\n]*@")

# First words containing any of these are identifiers or code, not prose.
CAPITALIZATION_EXCEPTIONS = frozenset("_$()")

TERMINAL_CHARACTERS = frozenset("?!.;}")


@dataclass(frozen=True)
class CommentMatch:
    """A comment line split into its parts.

    Invariant: prefix == marker + space and line == prefix + body.
    """

    prefix: str
    marker: str
    space: str
    body: str

    @property
    def is_directive(self) -> bool:
        """True for tooling annotations such as @codeCoverageIgnoreStart."""
        return DIRECTIVE_RE.match(self.body) is not None


def match_comment(line: str) -> CommentMatch | None:
    """Decompose a line into a CommentMatch, or None if it is not a comment."""
    match = COMMENT_RE.match(line)
    if match is None:
        return None
    return CommentMatch(
        prefix=match.group("prefix"),
        marker=match.group("marker"),
        space=match.group("space"),
        body=match.group("body"),
    )


def is_processable_comment(line: str) -> bool:
    """Check whether a line is a "//" comment that should be normalized."""
    if COMMENT_RE.match(line) is None:
        return False

    return not any(pattern.match(line) for pattern in EXCLUDED_COMMENT_PATTERNS)


def capitalize(body: str) -> str:
    """Uppercase the first letter of a comment body, if it reads as prose.

    The body is returned unchanged when its first word contains one of
    CAPITALIZATION_EXCEPTIONS or looks like a file name (has a dot that is
    not its last character).
    """
    first_word = body.split(" ")[0]

    if any(char in CAPITALIZATION_EXCEPTIONS for char in first_word):
        return body

    dot = first_word.find(".")
    if dot != -1 and dot < len(first_word) - 1:
        return body

    return body[:1].upper() + body[1:]


def _normalize_spacing(line: str) -> str:
    comment = match_comment(line)
    if comment is None or not comment.body:
        return line
    return f"{comment.marker} {comment.body}"


def _capitalize_line(line: str) -> str:
    comment = match_comment(line)
    if comment is None:
        return line
    return comment.prefix + capitalize(comment.body)


def _punctuate_line(line: str) -> str:
    comment = match_comment(line)
    if comment is None or not comment.body or comment.is_directive:
        return line

    last = line[-1]
    if last == ":":
        return line[:-1] + "."
    if last not in TERMINAL_CHARACTERS:
        return line + "."
    return line


def rewrite_comment_line(line: str, prev_is_comment: bool, next_is_comment: bool) -> str:
    """Normalize one line given the comment status of its neighbours.

    Non-comment lines are returned unchanged.
    """
    if not is_processable_comment(line):
        return line

    line = _normalize_spacing(line)

    # Start of a block.
    if not prev_is_comment:
        line = _capitalize_line(line)

    # End of a block.
    if not next_is_comment:
        line = _punctuate_line(line)

    return line


def apply_comment_pass_to_lines(lines: list[str]) -> list[str]:
    """Run the comment state machine over a list of lines.

    The "previous line was a comment" flag is threaded through the loop and
    never outlives one call.
    """
    flags = [is_processable_comment(line) for line in lines]
    result = []
    prev_was_comment = False

    for i, line in enumerate(lines):
        cur_is_comment = flags[i]
        next_is_comment = flags[i + 1] if i + 1 < len(lines) else False

        if cur_is_comment:
            line = rewrite_comment_line(line, prev_was_comment, next_is_comment)
        result.append(line)

        prev_was_comment = cur_is_comment

    return result


def apply_comment_pass(content: str) -> str:
    """Normalize all inline comments of a document."""
    lines = content.split("\n")
    return "\n".join(apply_comment_pass_to_lines(lines))
