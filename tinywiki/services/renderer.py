#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page renderer
=============
Turns a page's raw bytes into an HTML fragment for the view layout.

The pipeline is fixed:

  1. decode and HTML-escape the whole body (``<``, ``>``, ``&``, ``'``, ``"``)
  2. find ``[Title]`` markers in the escaped text
  3. replace each marker with ``<a href="/view/Title">Title</a>``

Escaping runs first, so page content can never inject markup; the only
live tags in the output are the generated anchors.  Escaping leaves ``[``,
``]`` and alphanumerics untouched, so marker detection is unaffected.

``render`` is pure and holds no state — safe to call from any number of
concurrent requests.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from markupsafe import Markup, escape

from .links import find_links


# -----------------------------------------------------------------------------

ENCODING = "utf-8"
VIEW_PREFIX = "/view/"


# -----------------------------------------------------------------------------

def escape_body(raw_body: bytes | str) -> str:
    """Decode *raw_body* and return it HTML-escaped, without link rewriting."""
    text = raw_body.decode(ENCODING) if isinstance(raw_body, bytes) else raw_body
    return str(escape(text))


def link_for(title: str) -> str:
    # title is [a-zA-Z0-9]+ so it needs no escaping in either position
    return f'<a href="{VIEW_PREFIX}{title}">{title}</a>'


# -----------------------------------------------------------------------------

def render(raw_body: bytes | str) -> Markup:
    """Render *raw_body* to a display-safe HTML fragment."""
    escaped = escape_body(raw_body)

    parts: list[str] = []
    pos = 0
    for match in find_links(escaped):
        parts.append(escaped[pos:match.start])
        parts.append(link_for(match.title))
        pos = match.end
    parts.append(escaped[pos:])

    return Markup("".join(parts))


# -----------------------------------------------------------------------------
