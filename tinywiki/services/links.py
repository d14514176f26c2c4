#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Link detection
==============
Finds ``[Title]`` cross-reference markers in already-escaped page text.

A marker is ``[``, one or more ASCII letters or digits, then ``]``.  Matches
are leftmost-first and never overlap; ``[]`` and brackets around anything
else (spaces, punctuation, nested brackets) are left alone.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from typing import Iterator, NamedTuple


# -----------------------------------------------------------------------------

LINK_RE = re.compile(r"\[([a-zA-Z0-9]+)\]")


# -----------------------------------------------------------------------------

class LinkMatch(NamedTuple):
    start: int      # index of the opening "["
    end: int        # index just past the closing "]"
    title: str

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end


# -----------------------------------------------------------------------------

class LinkScan:
    """Lazy view over the markers in *text*.

    Each call to ``iter()`` starts a fresh scan, so the same object can be
    walked any number of times.
    """

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[LinkMatch]:
        for m in LINK_RE.finditer(self.text):
            yield LinkMatch(m.start(), m.end(), m.group(1))

    def titles(self) -> list[str]:
        return [m.title for m in self]


# -----------------------------------------------------------------------------

def find_links(text: str) -> LinkScan:
    return LinkScan(text)


# -----------------------------------------------------------------------------
