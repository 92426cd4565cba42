"""Textual comment stripping for PHP sources.

The patterns are not lexer-aware: a ``//`` or ``#`` inside a quoted string
still starts a comment. Reference detection accepts that imprecision.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

LINE_COMMENT = re.compile(r"//.*")
BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
HASH_COMMENT = re.compile(r"#.*")

# Order in which spans are collected into the comment-only text.
_EXTRACTION_ORDER = (LINE_COMMENT, BLOCK_COMMENT, HASH_COMMENT)


@dataclass(frozen=True)
class StrippedSource:
    """A source file split into executable text and comment text."""

    code: str
    comments: str


def remove_comments(text: str) -> str:
    """Return ``text`` with block, then line, then hash comments removed."""
    stripped = BLOCK_COMMENT.sub("", text)
    stripped = LINE_COMMENT.sub("", stripped)
    return HASH_COMMENT.sub("", stripped)


def extract_comments(text: str) -> str:
    """Return every comment span of the original ``text``, one per line."""
    parts = []
    for pattern in _EXTRACTION_ORDER:
        for match in pattern.finditer(text):
            parts.append(match.group(0))
            parts.append("\n")
    return "".join(parts)


def strip_comments(text: str) -> StrippedSource:
    return StrippedSource(code=remove_comments(text), comments=extract_comments(text))


__all__ = [
    "BLOCK_COMMENT",
    "HASH_COMMENT",
    "LINE_COMMENT",
    "StrippedSource",
    "extract_comments",
    "remove_comments",
    "strip_comments",
]
