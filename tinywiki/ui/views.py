#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Jinja2 UI views (server-rendered HTML pages)
============================================
GET  /                 — redirect to the front page
GET  /pages            — index of all pages
GET  /view/{title}     — view a page (redirects to edit if it doesn't exist)
GET  /edit/{title}     — edit form
POST /save/{title}     — save the edit form, then redirect to the view
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import functools
import re

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from tinywiki.core.templates import PageTemplates, get_templates
from tinywiki.schemas import TITLE_PATTERN
from tinywiki.services import pages as page_svc
from tinywiki.services.storage import PageNotFound, PageStore, StorageError, get_store


# -----------------------------------------------------------------------------

router = APIRouter(tags=["ui"])

_VALID_TITLE = re.compile(TITLE_PATTERN)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def valid_title(handler):
    """Reject any request whose ``title`` path parameter isn't alphanumeric.

    The wrapped handler only ever sees titles matching ``[a-zA-Z0-9]+``;
    anything else gets a 404 before it runs.
    """
    @functools.wraps(handler)
    async def wrapper(*args, **kwargs):
        title = kwargs.get("title", "")
        if not _VALID_TITLE.fullmatch(title):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invalid page title")
        return await handler(*args, **kwargs)
    return wrapper


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


def _storage_failure(e: StorageError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Home / index
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/")
async def home(request: Request):
    settings = request.app.state.settings
    return _redirect(f"/view/{settings.front_page}")


@router.get("/pages", response_class=HTMLResponse)
async def page_index(
    request: Request,
    store: PageStore = Depends(get_store),
    templates: PageTemplates = Depends(get_templates),
):
    return templates.render(request, "index", titles=store.titles())


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# View / edit / save
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/view/{title}", response_class=HTMLResponse)
@valid_title
async def view_page(
    request: Request,
    title: str,
    store: PageStore = Depends(get_store),
    templates: PageTemplates = Depends(get_templates),
):
    try:
        page = await page_svc.view_page(store, title)
    except PageNotFound:
        return _redirect(f"/edit/{title}")
    except StorageError as e:
        raise _storage_failure(e)
    return templates.render(request, "view", page)


@router.get("/edit/{title}", response_class=HTMLResponse)
@valid_title
async def edit_page(
    request: Request,
    title: str,
    store: PageStore = Depends(get_store),
    templates: PageTemplates = Depends(get_templates),
):
    try:
        page = await page_svc.edit_page(store, title)
    except StorageError as e:
        raise _storage_failure(e)
    return templates.render(request, "edit", page)


@router.post("/save/{title}")
@valid_title
async def save_page(
    request: Request,
    title: str,
    body: str = Form(default=""),
    store: PageStore = Depends(get_store),
):
    try:
        await page_svc.save_page(store, title, body)
    except StorageError as e:
        raise _storage_failure(e)
    return _redirect(f"/view/{title}")


# -----------------------------------------------------------------------------
