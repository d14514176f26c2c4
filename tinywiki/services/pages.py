#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page service
============
View / edit / save on top of a PageStore.

  missing ──edit──▶ editable ──save──▶ persisted
                                  ▲        │
                                  └─ view ─┘

Titles are validated by the router before any of these are called.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from tinywiki.schemas import Page, PageState
from .renderer import render
from .storage import PageNotFound, PageStore


# -----------------------------------------------------------------------------

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

async def view_page(store: PageStore, title: str) -> Page:
    """Load and render *title*.  Raises PageNotFound if it has never been saved."""
    page = await store.load(title)
    page.display_body = render(page.body)
    return page


async def edit_page(store: PageStore, title: str) -> Page:
    """Load *title* for editing; a missing page starts out blank."""
    try:
        page = await store.load(title)
    except PageNotFound:
        log.debug("No page %s yet, starting blank", title)
        return Page(title=title, body=b"", state=PageState.EDITABLE)
    page.state = PageState.EDITABLE
    return page


async def save_page(store: PageStore, title: str, body: bytes | str) -> Page:
    """Overwrite *title* with *body*.  Raises StorageError if the write fails."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    return await store.save(title, body)


# -----------------------------------------------------------------------------
