"""Small text helpers shared by the synthesizer and exporters."""

from __future__ import annotations

import re
import urllib.parse

_TITLE_TOKEN = re.compile(r"\w\S*", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def title_case(text: str) -> str:
    """
    Upper-case the first character of every token and lower-case the rest.

    A token starts at an ASCII word character and runs to the next whitespace, so
    ``"c++ and rust-lang"`` becomes ``"C++ And Rust-lang"``.

    >>> title_case("machine LEARNING")
    'Machine Learning'
    """
    if not text:
        return text
    return _TITLE_TOKEN.sub(lambda m: m.group(0).capitalize(), text)


def slugify_query(query: str, separator: str = "-") -> str:
    """Lower-case the query and collapse whitespace runs into *separator*."""
    return _WHITESPACE.sub(separator, query.lower())


def export_filename(query: str, extension: str) -> str:
    """Build ``<query with whitespace as underscores>_documentation.<ext>``."""
    return f"{_WHITESPACE.sub('_', query)}_documentation.{extension}"


def encode_uri_component(value: str) -> str:
    """Percent-encode like JavaScript's ``encodeURIComponent``."""
    return urllib.parse.quote(value, safe="-_.!~*'()")
