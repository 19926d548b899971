"""Tests for inline comment classification and rewriting."""

import pytest

from srcfixer.comments import (
    apply_comment_pass,
    apply_comment_pass_to_lines,
    capitalize,
    is_processable_comment,
    match_comment,
    rewrite_comment_line,
)


class TestClassifier:
    """Which lines count as processable comments."""

    @pytest.mark.parametrize("line", ["// hello", "  //no-space", "//", "\t// indented", "//   spaced"])
    def test_accepts_comments(self, line):
        assert is_processable_comment(line)

    @pytest.mark.parametrize(
        "line",
        [
            "  // --> end",
            "//-->",
            "// <![CDATA[",
            "//<![CDATA[",
            "//]]>",
            "  // ]]>",
        ],
    )
    def test_rejects_escapers(self, line):
        assert not is_processable_comment(line)

    @pytest.mark.parametrize(
        "line",
        ["", "code(); // trailing comment", "/* block */", "# hash", "/ single slash", " * docblock line"],
    )
    def test_rejects_non_comments(self, line):
        assert not is_processable_comment(line)

    def test_arrow_inside_text_is_still_a_comment(self):
        """Only a leading --> marks an HTML comment closer."""
        assert is_processable_comment("// see a --> b")

    def test_match_parts(self):
        comment = match_comment("  // hello world")
        assert comment.marker == "  //"
        assert comment.space == " "
        assert comment.prefix == "  // "
        assert comment.body == "hello world"

    def test_match_without_space(self):
        comment = match_comment("//hello")
        assert comment.prefix == comment.marker == "//"
        assert comment.space == ""
        assert comment.body == "hello"

    def test_match_non_comment(self):
        assert match_comment("return 1;") is None


class TestCapitalizer:
    """First letter capitalization rules."""

    def test_capitalizes_prose(self):
        assert capitalize("hello world") == "Hello world"

    def test_dollar_word_unchanged(self):
        assert capitalize("$foo bar") == "$foo bar"

    def test_underscore_word_unchanged(self):
        assert capitalize("my_function does things") == "my_function does things"

    @pytest.mark.parametrize("body", ["foo() returns", "(optional) flag", "call(x)"])
    def test_parenthesis_word_unchanged(self, body):
        assert capitalize(body) == body

    def test_filename_unchanged(self):
        assert capitalize("module.inc is great") == "module.inc is great"

    def test_trailing_dot_is_not_a_filename(self):
        assert capitalize("a.") == "A."

    def test_empty_body(self):
        assert capitalize("") == ""

    def test_only_first_character_changes(self):
        assert capitalize("hello World FOO") == "Hello World FOO"

    def test_unicode(self):
        assert capitalize("éléphant rose") == "Éléphant rose"

    def test_exception_in_later_word_is_ignored(self):
        assert capitalize("see $foo") == "See $foo"


class TestRewriter:
    """Single-line rewriting given neighbour context."""

    def test_non_comment_unchanged(self):
        assert rewrite_comment_line("return 1", False, False) == "return 1"

    def test_escaper_unchanged(self):
        assert rewrite_comment_line("//<![CDATA[", False, False) == "//<![CDATA["

    def test_single_comment(self):
        assert rewrite_comment_line("//hello", False, False) == "// Hello."

    def test_keeps_indentation(self):
        assert rewrite_comment_line("    //hello", False, False) == "    // Hello."

    def test_extra_spaces_are_kept_in_body(self):
        assert rewrite_comment_line("//  indented code", False, True) == "//  indented code"

    def test_no_capitalization_inside_block(self):
        assert rewrite_comment_line("// second", True, False) == "// second."

    def test_no_punctuation_before_another_comment(self):
        assert rewrite_comment_line("// first", False, True) == "// First"

    def test_colon_becomes_period(self):
        assert rewrite_comment_line("// as follows:", False, False) == "// As follows."

    @pytest.mark.parametrize("end", ["?", "!", ".", ";", "}"])
    def test_terminal_characters_kept(self, end):
        line = f"// done{end}"
        assert rewrite_comment_line(line, True, False) == line

    @pytest.mark.parametrize("line", ["// @codeCoverageIgnoreStart", "//@see foo", "//   @todo later"])
    def test_directive_not_punctuated(self, line):
        assert not rewrite_comment_line(line, True, False).endswith(".")

    def test_empty_comment(self):
        assert rewrite_comment_line("//", False, False) == "//"
        assert rewrite_comment_line("  //", True, False) == "  //"


class TestCommentPass:
    """Block-level behavior across lines."""

    def test_two_line_block(self):
        assert apply_comment_pass_to_lines(["// first", "// second thought"]) == [
            "// First",
            "// second thought.",
        ]

    def test_block_interrupted_by_code(self):
        lines = ["//one", "x = 1;", "//two"]
        assert apply_comment_pass_to_lines(lines) == ["// One.", "x = 1;", "// Two."]

    def test_escaper_breaks_block(self):
        lines = ["// before", "//<![CDATA[", "// after"]
        assert apply_comment_pass_to_lines(lines) == ["// Before.", "//<![CDATA[", "// After."]

    def test_empty_document(self):
        assert apply_comment_pass("") == ""

    def test_preserves_line_count(self):
        content = "a\n// b\n\n//c\n"
        assert len(apply_comment_pass(content).split("\n")) == len(content.split("\n"))

    def test_blank_line_ends_block(self):
        content = "// first\n\n// second\n"
        assert apply_comment_pass(content) == "// First.\n\n// Second.\n"

    def test_directive_inside_block(self):
        content = "// @codeCoverageIgnoreStart\nfoo();\n"
        assert apply_comment_pass(content) == "// @codeCoverageIgnoreStart\nfoo();\n"

    def test_idempotent(self):
        content = "//first line\n//  code();\n//last one:\nx();\n// @see y\n//\n"
        once = apply_comment_pass(content)
        assert apply_comment_pass(once) == once

    def test_block_ending_with_empty_comment_has_no_punctuation(self):
        """An empty "//" closing a block gets no full stop, nor does the line above it."""
        assert apply_comment_pass("// a\n//\n") == "// A\n//\n"
