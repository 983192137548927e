#!/usr/bin/env python3
"""
Test suite for configuration line normalization.
"""

import io
import unittest

from config_checks.parsers.line import normalize_line, normalize_lines


class TestNormalizeLine(unittest.TestCase):
    """Test normalize_line."""

    def test_collapse_and_strip_comment(self):
        """Test whitespace collapsing and inline comment removal."""
        cases = [
            ("  a    b  ; comment", "a b"),
            ("a\t\tb", "a b"),
            ("a b # trailing", "a b"),
            ("a b\t;comment", "a b"),
            ("zone \"example.com\" {   type master; };", "zone \"example.com\" { type master; };"),
            ("a b   ", "a b"),
            ("", ""),
            ("   ", ""),
        ]

        for line, expected in cases:
            with self.subTest(line=line):
                self.assertEqual(normalize_line(line), expected)

    def test_marker_without_whitespace_is_kept(self):
        """Test that ; and # only start a comment after whitespace."""
        self.assertEqual(normalize_line("a;b"), "a;b")
        self.assertEqual(normalize_line("color=#fff  x"), "color=#fff x")
        self.assertEqual(normalize_line("allow { any; };"), "allow { any; };")

    def test_full_line_comment(self):
        """Test that full-line comments normalize to an empty string."""
        for line in ["# full comment", "; comment", "   # indented", "\t;x"]:
            with self.subTest(line=line):
                self.assertEqual(normalize_line(line), "")

    def test_quoted_content_untouched(self):
        """Test that quoted spans are copied verbatim."""
        cases = [
            'value = "a  b ; c"',
            "value = 'x   # y'",
            "mixed \"it's\"",
            "msg 'say \"hi  there\"'",
        ]

        for line in cases:
            with self.subTest(line=line):
                self.assertEqual(normalize_line(line), line)

    def test_quoted_and_unquoted(self):
        """Test collapsing around quoted spans."""
        self.assertEqual(
            normalize_line('key   "a  b"    secret ; note'), 'key "a  b" secret'
        )

    def test_non_string(self):
        """Test that non-string input normalizes to an empty string."""
        self.assertEqual(normalize_line(None), "")
        self.assertEqual(normalize_line(42), "")

    def test_unterminated_quote(self):
        """Test that an unclosed quote extends to the end of the line."""
        self.assertEqual(normalize_line('name "a   b ; c'), 'name "a   b ; c')
        self.assertEqual(normalize_line("name 'a  b   "), "name 'a  b")

    def test_idempotent(self):
        """Test that normalizing twice changes nothing."""
        lines = [
            "  a    b  ; comment",
            'value = "a  b ; c"',
            "# full comment",
            "name 'a  b   ",
            "x\t y  #z",
            'key   "a  b"    secret ; note',
        ]

        for line in lines:
            with self.subTest(line=line):
                once = normalize_line(line)
                self.assertEqual(normalize_line(once), once)


class TestNormalizeLines(unittest.TestCase):
    """Test normalize_lines."""

    def test_normalize_file(self):
        """Test normalizing an open file, dropping blanks and comments."""
        text = (
            "# BIND key\n"
            "key \"update-key\" {\r\n"
            "\n"
            "    algorithm   hmac-sha256;   # default\n"
            "    secret \"c2Vj  cmV0\";\n"
            "};\n"
        )

        self.assertEqual(
            list(normalize_lines(io.StringIO(text))),
            [
                'key "update-key" {',
                "algorithm hmac-sha256;",
                'secret "c2Vj  cmV0";',
                "};",
            ],
        )

    def test_keep_empty(self):
        """Test that skip_empty=False keeps line positions."""
        lines = ["a  b\n", "# comment\n", "\n", "c\n"]

        self.assertEqual(list(normalize_lines(lines, skip_empty=False)), ["a b", "", "", "c"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
