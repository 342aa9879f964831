"""Tests for shared text helpers."""

import pytest

from searchdocs.shared.text import encode_uri_component, export_filename, slugify_query, title_case


class TestTitleCase:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("rust", "Rust"),
            ("machine LEARNING", "Machine Learning"),
            ("c++ and rust-lang", "C++ And Rust-lang"),
            ("éclair", "éClair"),
            ("ŉ test", "ŉ Test"),
            ("", ""),
        ],
    )
    def test_values(self, text, expected):
        assert title_case(text) == expected

    @pytest.mark.parametrize("text", ["hello world", "ÄPFEL straße", "node.js API", "  spaced  out ", "ŉ test", "éclair"])
    def test_idempotent(self, text):
        once = title_case(text)
        assert title_case(once) == once

    def test_preserves_whitespace(self):
        assert title_case("  a  b ") == "  A  B "


class TestFilenames:
    def test_slugify(self):
        assert slugify_query("Machine   Learning Basics") == "machine-learning-basics"

    def test_export_filename(self):
        assert export_filename("rust  lang\tbook", "pdf") == "rust_lang_book_documentation.pdf"
        assert export_filename("rust", "txt") == "rust_documentation.txt"


class TestEncodeUriComponent:
    def test_reserved_characters(self):
        assert encode_uri_component("a b&c/d?") == "a%20b%26c%2Fd%3F"

    def test_unreserved_kept(self):
        assert encode_uri_component("A-z_0.9!~*'()") == "A-z_0.9!~*'()"

    def test_unicode(self):
        assert encode_uri_component("é") == "%C3%A9"
