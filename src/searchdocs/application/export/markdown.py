"""Markdown handling for the PDF layout."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

# Applied in order; later patterns see the output of earlier ones.
_MARKDOWN_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"#+\s"), ""),
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"\*(.*?)\*"), r"\1"),
    (re.compile(r"\[(.*?)\]\(.*?\)"), r"\1"),
    (re.compile(r"`(.*?)`"), r"\1"),
)


def strip_markdown(text: str) -> str:
    """
    Remove heading markers, emphasis, link targets and code ticks.

    >>> strip_markdown("## **Bold** [link](https://x.y) `code`")
    'Bold link code'
    """
    for pattern, replacement in _MARKDOWN_RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


class LineKind(StrEnum):
    BLANK = "blank"
    HEADING = "heading"
    BULLET = "bullet"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class FormattedLine:
    kind: LineKind
    text: str = ""
    level: int = 0


_HEADING = re.compile(r"^(#{1,6}) (.*)$")
_BULLET_PREFIXES = ("- ", "• ")


def classify_line(line: str) -> FormattedLine:
    """
    Classify one raw Markdown line, then strip inline syntax from its content.

    Headings deeper than ``###`` are treated as level 3.
    """
    if not line.strip():
        return FormattedLine(LineKind.BLANK)

    heading = _HEADING.match(line)
    if heading:
        level = min(len(heading.group(1)), 3)
        return FormattedLine(LineKind.HEADING, strip_markdown(heading.group(2)), level)

    if line.startswith(_BULLET_PREFIXES):
        return FormattedLine(LineKind.BULLET, strip_markdown(line[2:]))

    return FormattedLine(LineKind.TEXT, strip_markdown(line))


def parse_markdown(text: str) -> list[FormattedLine]:
    return [classify_line(line) for line in text.strip().split("\n")]
